from __future__ import annotations

from ..models import Visibility
from ..workflow import run_interactive
from .utils import build_cli


def register(subparsers) -> None:
    parser = subparsers.add_parser(
        "create",
        aliases=["criar", "new"],
        help="Cria um novo repositório (interativo)",
        description="""
Cria um novo repositório no GitHub usando o gh.
Opções não informadas são perguntadas de forma interativa.

Exemplos:
  ghrepo create                                   # Pergunta tudo
  ghrepo create --name meu-repo --private         # Pergunta só o resto
  ghrepo create --name repo --no-clone --yes      # Sem confirmação final
        """,
    )
    add_create_arguments(parser)


def add_create_arguments(parser) -> None:
    parser.add_argument("--name", help="Nome do repositório.")
    parser.add_argument("--description", help="Descrição do repositório ('' para nenhuma).")
    visibility = parser.add_mutually_exclusive_group()
    visibility.add_argument("--private", dest="visibility", action="store_const", const=Visibility.PRIVATE, help="Repositório privado.")
    visibility.add_argument("--public", dest="visibility", action="store_const", const=Visibility.PUBLIC, help="Repositório público.")
    readme = parser.add_mutually_exclusive_group()
    readme.add_argument("--readme", dest="readme", action="store_true", default=None, help="Cria README.md no GitHub (--add-readme).")
    readme.add_argument("--no-readme", dest="readme", action="store_false", help="Não cria README.md no GitHub.")
    parser.add_argument("--branch", help="Nome da branch principal.")
    clone = parser.add_mutually_exclusive_group()
    clone.add_argument("--clone", dest="clone", action="store_true", default=None, help="Clona sem perguntar.")
    clone.add_argument("--no-clone", dest="clone", action="store_false", help="Não clona o repositório.")
    parser.add_argument("--clone-dir", help="Diretório onde o clone é feito (default: GHREPO_CLONE_DIR ou atual).")
    parser.add_argument(
        "--readme-template",
        action="store_true",
        help="Sem --readme: gera README.md local a partir do modelo, faz commit e push após o clone.",
    )
    parser.add_argument("--yes", "-y", dest="assume_yes", action="store_true", help="Não pede confirmação final.")
    parser.set_defaults(visibility=None, readme=None, clone=None, handler=_run, run_log=True)


def _run(args, settings) -> int:
    if args.clone_dir:
        settings = settings.with_updates(clone_dir=args.clone_dir)
    return run_interactive(
        build_cli(settings),
        settings,
        name=args.name,
        description=args.description,
        visibility=args.visibility,
        create_readme=args.readme,
        main_branch=args.branch,
        clone=args.clone,
        assume_yes=args.assume_yes,
        readme_template=args.readme_template,
    )
