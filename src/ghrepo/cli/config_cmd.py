from __future__ import annotations

from .. import config as config_mod
from ..config import CONFIG_KEYS, get_config, load_config, set_config, unset_config
from ..output import get_console, print_success, print_warning


def register(subparsers) -> None:
    config_parser = subparsers.add_parser(
        "config",
        help="Gerencia configurações",
        description="""
Gerencia os valores padrão do ghrepo (similar ao git config).
As configurações são salvas em ~/.ghrepo/config.json

Exemplos:
  ghrepo config set default_branch develop  # Branch sugerida
  ghrepo config set visibility private      # Visibilidade sugerida
  ghrepo config set clone_dir ~/projetos    # Onde clonar
  ghrepo config get default_branch          # Mostra um valor
  ghrepo config unset clone_dir             # Remove um valor
  ghrepo config unset --all                 # Remove tudo
        """,
    )
    config_subparsers = config_parser.add_subparsers(dest="config_command")

    config_set = config_subparsers.add_parser("set", help="Define uma configuração")
    config_set.add_argument("name", choices=CONFIG_KEYS, help="Nome da configuração")
    config_set.add_argument("value", help="Valor da configuração")

    config_get = config_subparsers.add_parser("get", help="Obtém uma configuração")
    config_get.add_argument("name", choices=CONFIG_KEYS, help="Nome da configuração")

    config_unset = config_subparsers.add_parser("unset", help="Remove uma configuração")
    config_unset.add_argument("name", nargs="?", choices=CONFIG_KEYS, help="Nome da configuração")
    config_unset.add_argument("--all", dest="unset_all", action="store_true", help="Remove todas as configurações")

    config_parser.set_defaults(handler=_run, run_log=False)


def _run(args, settings) -> int:
    console = get_console()
    if args.config_command == "set":
        try:
            value = set_config(args.name, args.value)
        except ValueError as exc:
            raise SystemExit(f"Erro: {exc}")
        print_success(f"Configuração '{args.name}' definida como '{value}'.")
    elif args.config_command == "get":
        value = get_config(args.name)
        if value is None:
            return 1
        console.print(value, markup=False)
    elif args.config_command == "unset":
        name = "--all" if args.unset_all else args.name
        if not name:
            raise SystemExit("Informe o nome da configuração ou --all.")
        if unset_config(name):
            if name == "--all":
                print_success("Todas as configurações foram removidas!")
            else:
                print_success(f"Configuração '{name}' removida!")
        else:
            print_warning(f"Configuração '{name}' não encontrada!")
    else:
        config = load_config()
        if not config:
            console.print("Nenhuma configuração encontrada!")
            return 0
        console.print(f"\nConfigurações ({config_mod.CONFIG_FILE}):", markup=False)
        console.print("-" * 30)
        for key, value in config.items():
            console.print(f"{key} = {value}", markup=False)
    return 0
