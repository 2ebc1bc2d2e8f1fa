from __future__ import annotations

from typing import List, Tuple

from .utils import print_examples

EXAMPLES: List[Tuple[str, str]] = [
    (
        "Criar um repositório respondendo às perguntas:",
        "ghrepo create",
    ),
    (
        "Criar um repositório privado com README e branch 'develop':",
        'ghrepo create --name meu-repo --description "Meu projeto" --private --readme --branch develop',
    ),
    (
        "Criar sem perguntas e sem clonar:",
        "ghrepo create --name meu-repo --description '' --public --no-readme --branch main --no-clone --yes",
    ),
    (
        "Criar, clonar em ~/projetos e publicar o README modelo:",
        "ghrepo create --name meu-repo --clone-dir ~/projetos --no-readme --readme-template",
    ),
    (
        "Só verificar gh, autenticação e git:",
        "ghrepo check",
    ),
    (
        "Definir a branch padrão e a visibilidade padrão:",
        "ghrepo config set default_branch develop && ghrepo config set visibility private",
    ),
    (
        "Ver e limpar logs antigos:",
        "ghrepo logs --limit 5 --show <run-id> --tail 50 --clean-days 30",
    ),
]


def register(subparsers) -> None:
    parser = subparsers.add_parser("exemplos", aliases=["examples"], help="Mostra comandos prontos.")

    def _handler(args, settings) -> int:
        print_examples(EXAMPLES)
        return 0

    parser.set_defaults(handler=_handler)
