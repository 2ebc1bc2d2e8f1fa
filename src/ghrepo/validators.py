"""
Validação de nomes de repositório e de branch.
"""

from __future__ import annotations

import re

REPO_NAME_RE = re.compile(r"[a-zA-Z0-9._-]+")

_BRANCH_FORBIDDEN_RE = re.compile(r"^[./-]|[./]$|\.\.|[\s~^:?*\[]|[\x00-\x1f\x7f]")

BRANCH_RULES = [
    "Começar com '.', '-' ou '/'",
    "Terminar com '.' ou '/'",
    "Conter espaços, '..', '~', '^', ':', '?', '*' ou '['",
    "Ser exatamente '@'",
]


def validate_repo_name(name: str) -> bool:
    """Nome aceito pelo GitHub: letras, números, '.', '-' e '_'."""
    return bool(name) and REPO_NAME_RE.fullmatch(name) is not None


def validate_branch_name(name: str) -> bool:
    """
    Aplica as regras de nome de branch do git (subconjunto de
    'git check-ref-format').
    """
    if not name or name == "@":
        return False
    return _BRANCH_FORBIDDEN_RE.search(name) is None
