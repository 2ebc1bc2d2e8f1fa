"""
Detecção do sistema operacional e instalação do GitHub CLI.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from enum import Enum
from typing import Callable, List, Sequence

from .output import print_error, print_status, print_success, print_warning

LOGGER = logging.getLogger("ghrepo")

MANUAL_INSTALL_URL = "https://cli.github.com/"

Runner = Callable[[Sequence[str]], int]


class OsKind(str, Enum):
    UBUNTU = "ubuntu"
    CENTOS = "centos"
    ARCH = "arch"
    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"
    UNKNOWN = "unknown"


_LINUX_PACKAGE_MANAGERS = (
    ("apt", OsKind.UBUNTU),
    ("yum", OsKind.CENTOS),
    ("pacman", OsKind.ARCH),
)

INSTALL_COMMANDS: dict[OsKind, List[List[str]]] = {
    OsKind.UBUNTU: [["sudo", "apt", "update"], ["sudo", "apt", "install", "-y", "gh"]],
    OsKind.CENTOS: [["sudo", "yum", "install", "-y", "gh"]],
    OsKind.ARCH: [["sudo", "pacman", "-S", "--noconfirm", "github-cli"]],
    OsKind.MACOS: [["brew", "install", "gh"]],
}

_INSTALL_TOOL = {
    OsKind.UBUNTU: "apt",
    OsKind.CENTOS: "yum",
    OsKind.ARCH: "pacman",
    OsKind.MACOS: "Homebrew",
}

_MANUAL_ONE_LINERS = {
    OsKind.UBUNTU: "Ou execute: sudo apt install gh",
    OsKind.LINUX: "Ou execute: sudo apt install gh",
    OsKind.CENTOS: "Ou execute: sudo yum install gh",
    OsKind.ARCH: "Ou execute: sudo pacman -S github-cli",
    OsKind.MACOS: "Ou execute: brew install gh",
    OsKind.WINDOWS: "Ou use: winget install --id GitHub.cli",
}


def detect_os(platform: str | None = None) -> OsKind:
    platform = platform or sys.platform
    if platform.startswith("linux"):
        for tool, kind in _LINUX_PACKAGE_MANAGERS:
            if shutil.which(tool):
                return kind
        return OsKind.LINUX
    if platform == "darwin":
        return OsKind.MACOS
    if platform in ("win32", "cygwin", "msys"):
        return OsKind.WINDOWS
    return OsKind.UNKNOWN


def install_command(os_kind: OsKind) -> List[List[str]]:
    """Comandos (argv) que instalam o gh no sistema informado; vazio se não houver."""
    return [list(cmd) for cmd in INSTALL_COMMANDS.get(os_kind, [])]


def manual_hints(os_kind: OsKind) -> List[str]:
    hints = [f"Acesse: {MANUAL_INSTALL_URL}"]
    one_liner = _MANUAL_ONE_LINERS.get(os_kind)
    if one_liner:
        hints.append(one_liner)
    return hints


def run_subprocess(cmd: Sequence[str]) -> int:
    LOGGER.info("$ %s", " ".join(cmd))
    try:
        subprocess.run(list(cmd), check=True)
    except subprocess.CalledProcessError as exc:
        LOGGER.info("-> código %s", exc.returncode)
        return exc.returncode
    except FileNotFoundError:
        LOGGER.error("Executável não encontrado: %s", cmd[0])
        return 127
    return 0


def ensure_sudo(runner: Runner = run_subprocess) -> bool:
    if runner(["sudo", "-n", "true"]) == 0:
        return True
    print_warning("Esta instalação requer privilégios de sudo.")
    print_status("Sua senha pode ser solicitada.")
    if runner(["sudo", "-v"]) != 0:
        print_error("Não foi possível obter privilégios de sudo.")
        return False
    return True


def install_gh(os_kind: OsKind, runner: Runner = run_subprocess, gh_bin: str = "gh") -> bool:
    """
    Instala o GitHub CLI usando o gerenciador de pacotes do sistema.
    Retorna True somente se gh_bin estiver no PATH ao final.
    """
    print_status("Instalando o GitHub CLI...")

    commands = install_command(os_kind)
    if not commands:
        if os_kind == OsKind.WINDOWS:
            print_error("Instalação automática não suportada no Windows.")
        else:
            print_error("Instalação automática não suportada para o seu sistema.")
        for hint in manual_hints(os_kind):
            print_status(hint)
        return False

    tool = _INSTALL_TOOL[os_kind]
    if os_kind == OsKind.MACOS:
        if not shutil.which("brew"):
            print_error(f"Homebrew não encontrado. Instale o Homebrew ou baixe em {MANUAL_INSTALL_URL}")
            return False
    elif not ensure_sudo(runner):
        return False

    print_status(f"Instalando via {tool}...")
    for cmd in commands:
        if runner(cmd) != 0:
            print_error(f"Falha ao instalar via {tool}.")
            return False

    if shutil.which(gh_bin):
        print_success("GitHub CLI instalado com sucesso!")
        return True
    print_error("A instalação falhou. Instale manualmente.")
    return False
