from __future__ import annotations

from ..output import print_success
from ..workflow import check_prerequisites
from .utils import build_cli


def register(subparsers) -> None:
    parser = subparsers.add_parser(
        "check",
        aliases=["verificar", "doctor"],
        help="Verifica gh, autenticação e configuração do git",
    )
    parser.set_defaults(handler=_run, run_log=True)


def _run(args, settings) -> int:
    cli = build_cli(settings)
    check_prerequisites(cli)
    user = cli.current_user()
    if user:
        print_success(f"Autenticado como '{user}'.")
    return 0
