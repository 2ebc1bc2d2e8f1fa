"""
Configurações do ghrepo.

Valores vêm, nesta ordem, de parâmetros explícitos, variáveis de ambiente
(ou arquivo .env) e do arquivo persistido em ~/.ghrepo/config.json, gerenciado
de forma similar ao 'git config'.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .output import print_warning
from .validators import validate_branch_name


load_dotenv()

CONFIG_DIR = Path.home() / ".ghrepo"
CONFIG_FILE = CONFIG_DIR / "config.json"

VISIBILITIES = ("public", "private")
CONFIG_KEYS = ("default_branch", "visibility", "clone_dir")


def load_config() -> Dict[str, Any]:
    """Carrega as configurações do arquivo."""
    if CONFIG_FILE.exists():
        try:
            data = json.loads(CONFIG_FILE.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            return {}
        return data if isinstance(data, dict) else {}
    return {}


def save_config(config: Dict[str, Any]) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(config, indent=2), encoding="utf-8")
    os.chmod(CONFIG_FILE, 0o600)


def _check_value(name: str, value: str) -> str:
    if name not in CONFIG_KEYS:
        raise ValueError(f"Configuração '{name}' desconhecida. Use uma de: {', '.join(CONFIG_KEYS)}.")
    value = value.strip()
    if name == "default_branch" and not validate_branch_name(value):
        raise ValueError(f"Nome de branch inválido: '{value}'.")
    if name == "visibility":
        value = value.lower()
        if value not in VISIBILITIES:
            raise ValueError("Visibilidade deve ser 'public' ou 'private'.")
    if name == "clone_dir":
        value = str(Path(value).expanduser())
    return value


def set_config(name: str, value: str) -> str:
    """
    Define uma configuração e retorna o valor normalizado.
    Similar ao 'git config --set'
    """
    value = _check_value(name, value)
    config = load_config()
    config[name] = value
    save_config(config)
    return value


def unset_config(name: str) -> bool:
    """
    Remove uma configuração ('--all' remove o arquivo inteiro).
    Retorna False quando não havia nada para remover.
    """
    if name == "--all":
        if CONFIG_FILE.exists():
            CONFIG_FILE.unlink()
            return True
        return False

    config = load_config()
    if name not in config:
        return False
    del config[name]
    save_config(config)
    return True


def get_config(name: str) -> Optional[str]:
    return load_config().get(name)


def _valid_stored(stored: Dict[str, Any]) -> Dict[str, str]:
    """
    Descarta valores inválidos do arquivo persistido (com aviso), para que
    'ghrepo config' continue funcionando e possa corrigi-los.
    """
    valid: Dict[str, str] = {}
    for name in CONFIG_KEYS:
        raw = stored.get(name)
        if raw is None:
            continue
        try:
            valid[name] = _check_value(name, str(raw))
        except ValueError as exc:
            print_warning(f"Ignorando '{name}' de {CONFIG_FILE}: {exc}")
    return valid


@dataclass(slots=True, frozen=True)
class Settings:
    gh_bin: str
    git_bin: str
    default_branch: str
    default_visibility: str
    clone_dir: Path
    log_dir: Path

    @staticmethod
    def load(
        *,
        gh_bin: str | None = None,
        git_bin: str | None = None,
        default_branch: str | None = None,
        default_visibility: str | None = None,
        clone_dir: str | Path | None = None,
        log_dir: str | Path | None = None,
    ) -> "Settings":
        stored = _valid_stored(load_config())

        gh_value = (gh_bin or os.getenv("GHREPO_GH_BIN", "gh")).strip()
        git_value = (git_bin or os.getenv("GHREPO_GIT_BIN", "git")).strip()

        branch_value = (
            default_branch
            or os.getenv("GHREPO_DEFAULT_BRANCH")
            or stored.get("default_branch")
            or "main"
        ).strip()
        if not validate_branch_name(branch_value):
            raise ValueError(f"Branch padrão inválida: '{branch_value}'. Verifique GHREPO_DEFAULT_BRANCH.")

        visibility_value = (
            default_visibility
            or os.getenv("GHREPO_VISIBILITY")
            or stored.get("visibility")
            or "public"
        ).strip().lower()
        if visibility_value not in VISIBILITIES:
            raise ValueError(f"Visibilidade inválida: '{visibility_value}'. Use 'public' ou 'private'.")

        clone_raw = clone_dir or os.getenv("GHREPO_CLONE_DIR") or stored.get("clone_dir") or "."
        clone_path = Path(clone_raw).expanduser().resolve()

        log_raw = log_dir or os.getenv("GHREPO_LOG_DIR") or CONFIG_DIR / "logs"
        log_path = Path(log_raw).expanduser()

        return Settings(
            gh_bin=gh_value,
            git_bin=git_value,
            default_branch=branch_value,
            default_visibility=visibility_value,
            clone_dir=clone_path,
            log_dir=log_path,
        )

    def with_updates(
        self,
        *,
        default_branch: str | None = None,
        default_visibility: str | None = None,
        clone_dir: str | Path | None = None,
    ) -> "Settings":
        updates: dict[str, object] = {}
        if default_branch is not None:
            updates["default_branch"] = default_branch.strip()
        if default_visibility is not None:
            updates["default_visibility"] = default_visibility.strip().lower()
        if clone_dir is not None:
            updates["clone_dir"] = Path(clone_dir).expanduser().resolve()
        if not updates:
            return self
        return replace(self, **updates)
