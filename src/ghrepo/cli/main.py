"""
Interface de linha de comando do ghrepo.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .. import __version__
from ..config import Settings
from ..logs import close_run_logger, generate_run_id, setup_run_logger
from ..output import get_console, print_error, print_status
from . import check, config_cmd, create, examples, logs

LOGGER = logging.getLogger("ghrepo")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghrepo",
        description="""
ghrepo - Criador de Repositórios GitHub

Cria repositórios no GitHub de forma interativa usando o GitHub CLI (gh).
Sem comando, executa 'create'.

Principais comandos:
  create     Cria um novo repositório
  check      Verifica gh, autenticação e git
  config     Gerencia configurações (similar ao git config)
  logs       Lista e limpa logs de execução
  exemplos   Mostra comandos prontos
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--gh-bin", help="Sobrescreve GHREPO_GH_BIN durante esta execução")
    parser.add_argument("--no-run-log", action="store_true", help="Não grava o .log da execução em disco.")
    subparsers = parser.add_subparsers(dest="command")
    create.register(subparsers)
    check.register(subparsers)
    config_cmd.register(subparsers)
    logs.register(subparsers)
    examples.register(subparsers)
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args_list = list(argv if argv is not None else sys.argv[1:])
    args = parser.parse_args(args_list)
    if args.command is None:
        args = parser.parse_args([*args_list, "create"])

    try:
        settings = Settings.load(gh_bin=args.gh_bin)
    except ValueError as exc:
        raise SystemExit(f"Erro: {exc}")

    if getattr(args, "run_log", False) and not args.no_run_log:
        run_id = generate_run_id()
        log_path = setup_run_logger(settings.log_dir, run_id)
        LOGGER.info("ghrepo %s - comando '%s'", __version__, args.command)
        print_status(f"Log da execução: {log_path}")

    return args.handler(args, settings)


def main(argv: Optional[Sequence[str]] = None) -> None:
    try:
        code = run(argv)
    except KeyboardInterrupt:
        get_console().print()
        print_error("Operação cancelada.")
        code = 130
    finally:
        close_run_logger()
    sys.exit(code)


if __name__ == "__main__":
    main()
