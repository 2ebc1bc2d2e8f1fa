"""
Interação com o GitHub através do GitHub CLI (gh) e do git.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Optional, Sequence

import requests

if TYPE_CHECKING:
    from .models import RepoRequest

LOGGER = logging.getLogger("ghrepo")

GITHUB_API_URL = "https://api.github.com"


class GhCommandError(Exception):
    def __init__(self, argv: Sequence[str], returncode: int, stderr: str = ""):
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr.strip()
        message = f"Comando '{' '.join(self.argv)}' falhou (código {returncode})"
        if self.stderr:
            message += f": {self.stderr}"
        super().__init__(message)


@contextmanager
def working_directory(path: Path) -> Iterator[Path]:
    previous = Path.cwd()
    os.chdir(path)
    try:
        yield path
    finally:
        os.chdir(previous)


class GitHubCli:
    def __init__(self, gh_bin: str = "gh", git_bin: str = "git"):
        self.gh_bin = gh_bin
        self.git_bin = git_bin

    def _run(
        self,
        argv: Sequence[str],
        *,
        capture: bool = True,
        cwd: Path | None = None,
    ) -> subprocess.CompletedProcess:
        LOGGER.info("$ %s", " ".join(argv))
        try:
            result = subprocess.run(
                list(argv),
                capture_output=capture,
                text=True,
                cwd=cwd,
            )
        except FileNotFoundError as exc:
            LOGGER.error("Executável não encontrado: %s", argv[0])
            return subprocess.CompletedProcess(list(argv), 127, "", str(exc))
        LOGGER.info("-> código %s", result.returncode)
        return result

    def gh(self, *args: str, **kwargs) -> subprocess.CompletedProcess:
        return self._run([self.gh_bin, *args], **kwargs)

    def git(self, *args: str, **kwargs) -> subprocess.CompletedProcess:
        return self._run([self.git_bin, *args], **kwargs)

    # gh

    def is_installed(self) -> bool:
        return shutil.which(self.gh_bin) is not None

    def is_authenticated(self) -> bool:
        return self.gh("auth", "status").returncode == 0

    def login(self, method: str) -> bool:
        """
        Executa 'gh auth login' de forma interativa.

        Args:
            method: 'web' (navegador) ou 'token' (lê o token da entrada padrão)
        """
        flag = {"web": "--web", "token": "--with-token"}[method]
        return self.gh("auth", "login", flag, capture=False).returncode == 0

    def current_user(self) -> Optional[str]:
        result = self.gh("api", "user", "--jq", ".login")
        if result.returncode != 0:
            return None
        return result.stdout.strip() or None

    def repo_exists(self, full_name: str) -> bool:
        return self.gh("repo", "view", full_name).returncode == 0

    def create_repo(self, request: "RepoRequest") -> None:
        """
        Cria o repositório remoto.
        Similar ao 'gh repo create NOME --public|--private'.
        """
        argv = [self.gh_bin, "repo", "create", request.name, request.visibility.flag]
        if request.description:
            argv += ["--description", request.description]
        if request.create_readme:
            argv.append("--add-readme")
        result = self._run(argv)
        if result.returncode != 0:
            raise GhCommandError(argv, result.returncode, result.stderr or "")

    def clone(self, full_name: str, cwd: Path) -> bool:
        return self.gh("repo", "clone", full_name, capture=False, cwd=cwd).returncode == 0

    def repo_url(self, full_name: str) -> Optional[str]:
        result = self.gh("repo", "view", full_name, "--json", "url", "-q", ".url")
        if result.returncode != 0:
            return None
        return result.stdout.strip() or None

    # git

    def git_available(self) -> bool:
        return shutil.which(self.git_bin) is not None

    def git_config_get(self, key: str) -> Optional[str]:
        result = self.git("config", "--global", key)
        if result.returncode != 0:
            return None
        return result.stdout.strip() or None

    def git_config_set(self, key: str, value: str) -> bool:
        return self.git("config", "--global", key, value).returncode == 0

    def set_main_branch(self, repo_dir: Path, branch: str) -> bool:
        """
        Renomeia a branch atual e publica no remoto.
        Similar ao 'git branch -M' + 'git push -u origin'.
        """
        with working_directory(repo_dir):
            for args in (("branch", "-M", branch), ("push", "-u", "origin", branch)):
                if self.git(*args, capture=False).returncode != 0:
                    return False
        return True

    def publish_initial_commit(self, repo_dir: Path, branch: str, paths: Sequence[str]) -> None:
        """
        Faz o commit inicial de arquivos locais e o push para a branch principal.
        """
        commands = [
            (("add", *paths), "Erro ao adicionar arquivos"),
            (("commit", "-m", "Initial commit"), "Erro ao criar commit inicial"),
            (("branch", "-M", branch), "Erro ao renomear a branch"),
            (("push", "-u", "origin", branch), "Erro ao fazer push para o GitHub"),
        ]
        with working_directory(repo_dir):
            for args, error_msg in commands:
                result = self.git(*args)
                if result.returncode != 0:
                    LOGGER.error(error_msg)
                    raise GhCommandError([self.git_bin, *args], result.returncode, result.stderr or error_msg)


def api_reachable(timeout: float = 5.0) -> bool:
    """Verifica se a API do GitHub responde (diagnóstico de rede)."""
    try:
        response = requests.get(GITHUB_API_URL, timeout=timeout)
    except requests.RequestException as exc:
        LOGGER.warning("API do GitHub inacessível: %s", exc)
        return False
    return response.status_code < 500
