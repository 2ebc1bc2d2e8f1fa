from __future__ import annotations

import logging

from rich.console import Console
from rich.markup import escape

LOGGER = logging.getLogger("ghrepo")

_CONSOLE: Console | None = None


def get_console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console()
    return _CONSOLE


def print_status(message: str) -> None:
    LOGGER.info(message)
    get_console().print(f"[blue]\\[INFO][/blue] {escape(message)}")


def print_success(message: str) -> None:
    LOGGER.info(message)
    get_console().print(f"[green]\\[SUCCESS][/green] {escape(message)}")


def print_warning(message: str) -> None:
    LOGGER.warning(message)
    get_console().print(f"[bold yellow]\\[WARNING][/bold yellow] {escape(message)}")


def print_error(message: str) -> None:
    LOGGER.error(message)
    get_console().print(f"[red]\\[ERROR][/red] {escape(message)}")
