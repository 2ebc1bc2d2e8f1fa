"""
Perguntas interativas (rich.prompt) usadas pelo fluxo de criação.
"""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Confirm, InvalidResponse, Prompt

from .gh import GitHubCli
from .models import Visibility
from .output import get_console, print_error, print_status, print_warning
from .validators import BRANCH_RULES, validate_branch_name, validate_repo_name


class YesNoConfirm(Confirm):
    """Confirm que aceita y/n e também yes/no, sem diferenciar maiúsculas."""

    validate_error_message = "[prompt.invalid]Responda y ou n"
    answers = {"y": True, "yes": True, "n": False, "no": False}

    def process_response(self, value: str) -> bool:
        answer = value.strip().lower()
        if answer not in self.answers:
            raise InvalidResponse(self.validate_error_message)
        return self.answers[answer]


def _console(console: Console | None) -> Console:
    return console or get_console()


def _menu(title: str, options: list[str], console: Console) -> None:
    console.print()
    console.print(title)
    for index, option in enumerate(options, start=1):
        console.print(f"{index}) {option}")


def ask_install_choice(console: Console | None = None) -> str:
    """Retorna 'auto' ou 'manual'; qualquer outra resposta encerra o programa."""
    console = _console(console)
    _menu(
        "Opções de instalação:",
        ["Instalar o GitHub CLI automaticamente", "Instalar manualmente depois"],
        console,
    )
    choice = Prompt.ask("Escolha uma opção (1-2)", console=console).strip()
    if choice == "1":
        return "auto"
    if choice == "2":
        return "manual"
    print_error("Opção inválida. Saindo.")
    raise SystemExit(1)


def ask_auth_method(console: Console | None = None) -> str:
    """Retorna 'web' ou 'token'; qualquer outra resposta encerra o programa."""
    console = _console(console)
    _menu(
        "Escolha o método de autenticação:",
        ["Login pelo navegador (recomendado)", "Login com token"],
        console,
    )
    choice = Prompt.ask("Digite a opção (1-2)", console=console).strip()
    if choice == "1":
        return "web"
    if choice == "2":
        return "token"
    print_error("Opção inválida. Saindo.")
    raise SystemExit(1)


def ask_git_identity(field: str, console: Console | None = None) -> str:
    return Prompt.ask(f"Digite seu {field} do Git", console=_console(console)).strip()


def check_repo_name(cli: GitHubCli, name: str, owner: str | None) -> bool:
    """
    Valida o nome e verifica colisão com OWNER/NOME.
    Imprime o motivo da rejeição.
    """
    if not name:
        print_error("O nome do repositório não pode ser vazio.")
        return False
    if not validate_repo_name(name):
        print_error("Nome de repositório inválido. Use apenas letras, números, pontos, hífens e underscores.")
        return False
    if owner and cli.repo_exists(f"{owner}/{name}"):
        print_error(f"O repositório '{owner}/{name}' já existe.")
        print_status("Escolha outro nome ou apague o repositório existente primeiro.")
        return False
    return True


def ask_repo_name(cli: GitHubCli, console: Console | None = None) -> str:
    console = _console(console)
    while True:
        name = Prompt.ask("Nome do repositório", console=console).strip()
        if not name or not validate_repo_name(name):
            check_repo_name(cli, name, None)
            continue
        owner = cli.current_user()
        if not owner:
            print_warning("Não foi possível determinar o usuário do GitHub. Seguindo sem verificar colisão.")
            return name
        if check_repo_name(cli, name, owner):
            return name


def ask_description(console: Console | None = None) -> str:
    return Prompt.ask("Descrição do repositório (opcional)", default="", show_default=False, console=_console(console)).strip()


def ask_visibility(default: Visibility = Visibility.PUBLIC, console: Console | None = None) -> Visibility:
    console = _console(console)
    _menu(
        "Visibilidade do repositório:",
        ["Público (visível para todos)", "Privado (visível só para você e colaboradores)"],
        console,
    )
    default_choice = "2" if default == Visibility.PRIVATE else "1"
    choice = Prompt.ask(
        f"Escolha a visibilidade (1-2, padrão: {default_choice})",
        default=default_choice,
        show_default=False,
        console=console,
    ).strip()
    if choice == "2":
        return Visibility.PRIVATE
    if choice == "1":
        return Visibility.PUBLIC
    return default


def ask_readme(console: Console | None = None) -> bool:
    return YesNoConfirm.ask("Criar arquivo README.md?", default=False, console=_console(console))


def ask_main_branch(default: str = "main", console: Console | None = None) -> str:
    console = _console(console)
    while True:
        branch = Prompt.ask(
            f"Nome da branch principal (padrão: {default})",
            default=default,
            show_default=False,
            console=console,
        ).strip() or default
        if validate_branch_name(branch):
            return branch
        print_branch_rules(branch)


def print_branch_rules(branch: str) -> None:
    print_error(f"Nome de branch inválido '{branch}'.")
    print_status("Nomes de branch não podem:")
    for rule in BRANCH_RULES:
        print_status(f"  - {rule}")


def ask_clone(console: Console | None = None) -> bool:
    return YesNoConfirm.ask("Clonar o repositório localmente?", default=True, console=_console(console))


def ask_proceed(console: Console | None = None) -> bool:
    return YesNoConfirm.ask("Prosseguir com a criação?", default=True, console=_console(console))
