from __future__ import annotations

from typing import List

from ..config import Settings
from ..gh import GitHubCli
from ..output import get_console


def print_examples(examples: List[tuple[str, str]]) -> None:
    console = get_console()
    console.print("Comandos frequentes do CLI:\n")
    for title, command in examples:
        console.print(f"- {title}\n  {command}\n", markup=False)


def build_cli(settings: Settings) -> GitHubCli:
    return GitHubCli(gh_bin=settings.gh_bin, git_bin=settings.git_bin)
