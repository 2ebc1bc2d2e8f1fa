"""
Fluxo linear de criação de repositório:
pré-requisitos -> perguntas -> resumo -> criação -> clone opcional.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from . import prompts
from .config import Settings
from .gh import GhCommandError, GitHubCli, api_reachable
from .models import RepoRequest, Visibility
from .output import get_console, print_error, print_status, print_success, print_warning
from .readme import render_readme
from .system import OsKind, detect_os, install_gh, manual_hints
from .validators import validate_branch_name

LOGGER = logging.getLogger("ghrepo")

__all__ = [
    "RepoRequest",
    "Visibility",
    "check_gh_cli",
    "check_auth",
    "check_git_config",
    "check_prerequisites",
    "collect_request",
    "print_summary",
    "create_repository",
    "run_interactive",
]


def check_gh_cli(cli: GitHubCli, os_kind: OsKind | None = None) -> None:
    if cli.is_installed():
        return

    print_error("O GitHub CLI (gh) não está instalado.")
    print_status("O GitHub CLI é necessário para este programa.")
    os_kind = os_kind or detect_os()
    LOGGER.info("Sistema detectado: %s", os_kind.value)

    if os_kind in (OsKind.UNKNOWN, OsKind.WINDOWS):
        print_status("Instalação manual necessária:")
        for hint in manual_hints(os_kind):
            print_status(hint)
        raise SystemExit(1)

    choice = prompts.ask_install_choice()
    if choice == "auto":
        if not install_gh(os_kind, gh_bin=cli.gh_bin):
            print_error("A instalação falhou. Instale manualmente e execute novamente.")
            raise SystemExit(1)
        print_success("Instalação concluída! Continuando...")
        return

    print_status("Instruções de instalação manual:")
    for hint in manual_hints(os_kind):
        print_status(hint)
    raise SystemExit(1)


def check_auth(cli: GitHubCli) -> None:
    print_status("Verificando autenticação no GitHub...")
    if cli.is_authenticated():
        print_success("Já autenticado no GitHub.")
        return

    print_warning("Você não está autenticado no GitHub.")
    print_status("Iniciando o processo de autenticação...")
    method = prompts.ask_auth_method()
    if not cli.login(method):
        print_error("Falha na autenticação. Tente novamente com 'gh auth login'.")
        raise SystemExit(1)


def check_git_config(cli: GitHubCli) -> None:
    if not cli.git_available():
        print_error("O git não está instalado ou não está no PATH.")
        raise SystemExit(1)

    values = {
        "user.name": cli.git_config_get("user.name"),
        "user.email": cli.git_config_get("user.email"),
    }
    if all(values.values()):
        return

    print_warning("O git não está configurado com as informações do usuário.")
    print_status("Isso é necessário para operações de branch.")
    labels = {"user.name": "nome de usuário", "user.email": "email"}
    for key, current in values.items():
        if current:
            continue
        value = prompts.ask_git_identity(labels[key])
        if not value:
            print_error(f"O {labels[key]} não pode ser vazio.")
            raise SystemExit(1)
        if not cli.git_config_set(key, value):
            print_error(f"Falha ao definir {key} do git.")
            raise SystemExit(1)
        print_success(f"{key} do git definido: {value}")


def check_prerequisites(cli: GitHubCli) -> None:
    print_status("Verificando pré-requisitos...")
    check_gh_cli(cli)
    print_status("Verificação do GitHub CLI concluída.")
    check_auth(cli)
    print_status("Verificação de autenticação concluída.")
    check_git_config(cli)
    print_status("Verificação da configuração do git concluída.")


def collect_request(
    cli: GitHubCli,
    settings: Settings,
    *,
    name: str | None = None,
    description: str | None = None,
    visibility: Visibility | None = None,
    create_readme: bool | None = None,
    main_branch: str | None = None,
) -> RepoRequest:
    """
    Executa a sequência de perguntas. Valores informados na linha de comando
    pulam a pergunta correspondente, mas continuam sendo validados.
    """
    print_status("Dados do repositório:")

    if name is None:
        name = prompts.ask_repo_name(cli)
    else:
        owner = cli.current_user()
        if not owner:
            print_warning("Não foi possível determinar o usuário do GitHub. Seguindo sem verificar colisão.")
        if not prompts.check_repo_name(cli, name, owner):
            raise SystemExit(1)

    if description is None:
        description = prompts.ask_description()

    if visibility is None:
        visibility = prompts.ask_visibility(Visibility(settings.default_visibility))

    if create_readme is None:
        create_readme = prompts.ask_readme()

    if main_branch is None:
        main_branch = prompts.ask_main_branch(settings.default_branch)
    elif not validate_branch_name(main_branch):
        prompts.print_branch_rules(main_branch)
        raise SystemExit(1)

    request = RepoRequest(
        name=name,
        description=description.strip(),
        visibility=visibility,
        create_readme=create_readme,
        main_branch=main_branch,
    )
    LOGGER.info("Pedido: %s", request)
    return request


def print_summary(request: RepoRequest) -> None:
    console = get_console()
    console.print()
    print_status("Configuração do repositório:")
    console.print(f"  Nome: {request.name}", markup=False)
    console.print(f"  Descrição: {request.description or '(nenhuma)'}", markup=False)
    console.print(f"  Visibilidade: {request.visibility.value}", markup=False)
    console.print(f"  Criar README: {'sim' if request.create_readme else 'não'}", markup=False)
    console.print(f"  Branch principal: {request.main_branch}", markup=False)


def _report_creation_failure(exc: GhCommandError) -> None:
    print_error("Falha ao criar o repositório.")
    if exc.stderr:
        print_error(exc.stderr)
    if not api_reachable():
        print_status("A API do GitHub não respondeu: verifique sua conexão de rede.")
    print_status("Possíveis causas:")
    print_status("  - Problemas de conectividade de rede")
    print_status("  - O nome do repositório já existe")
    print_status("  - Permissões insuficientes no GitHub")
    print_status("  - Limite de requisições da API do GitHub")


def _publish_readme_template(cli: GitHubCli, request: RepoRequest, repo_dir: Path) -> None:
    print_status("Gerando README.md a partir do modelo...")
    (repo_dir / "README.md").write_text(render_readme(request), encoding="utf-8")
    try:
        cli.publish_initial_commit(repo_dir, request.main_branch, ["README.md"])
    except GhCommandError as exc:
        print_error(f"Falha ao publicar o README: {exc}")
        print_status("O README.md ficou no diretório local, sem commit.")
        return
    print_success(f"README.md publicado na branch '{request.main_branch}'.")


def _clone_and_configure(
    cli: GitHubCli,
    request: RepoRequest,
    full_name: str,
    clone_dir: Path,
    readme_template: bool,
) -> None:
    print_status("Clonando o repositório localmente...")
    clone_dir.mkdir(parents=True, exist_ok=True)
    if not cli.clone(full_name, clone_dir):
        print_error("Falha ao clonar o repositório localmente.")
        print_status("O repositório foi criado com sucesso no GitHub.")
        print_status("Você pode cloná-lo manualmente depois com:")
        print_status(f"  gh repo clone {full_name}")
        return
    print_success("Repositório clonado com sucesso.")

    repo_dir = clone_dir / request.name
    if request.create_readme and request.main_branch != "main":
        print_status(f"Configurando a branch principal '{request.main_branch}'...")
        if not repo_dir.is_dir():
            print_error("Não foi possível acessar o diretório do repositório.")
        elif cli.set_main_branch(repo_dir, request.main_branch):
            print_success(f"Branch principal definida como '{request.main_branch}'.")
        else:
            print_error("Falha ao definir a branch principal personalizada.")
            print_status("O repositório local ficou com a branch padrão 'main'.")
    elif readme_template and not request.create_readme and repo_dir.is_dir():
        _publish_readme_template(cli, request, repo_dir)

    print_success(f"Repositório disponível em: {repo_dir}")


def create_repository(
    cli: GitHubCli,
    request: RepoRequest,
    settings: Settings,
    *,
    clone: Optional[bool] = None,
    readme_template: bool = False,
) -> str:
    """
    Cria o repositório e, opcionalmente, clona e ajusta a branch principal.
    Retorna a URL do repositório (ou OWNER/NOME quando a URL não é obtida).
    """
    print_status(f"Criando o repositório '{request.name}'...")
    try:
        cli.create_repo(request)
    except GhCommandError as exc:
        LOGGER.error("%s", exc)
        _report_creation_failure(exc)
        raise SystemExit(1)
    print_success(f"Repositório '{request.name}' criado com sucesso!")

    owner = cli.current_user()
    if not owner:
        print_warning("Não foi possível determinar o usuário do GitHub.")
    full_name = request.full_name(owner)

    if clone is None:
        clone = prompts.ask_clone()
    if clone:
        _clone_and_configure(cli, request, full_name, settings.clone_dir, readme_template)
    else:
        print_status("Repositório criado apenas no remoto.")

    url = cli.repo_url(full_name)
    if url:
        print_success(f"URL do repositório: {url}")
        return url
    print_success(f"Repositório criado: {full_name}")
    return full_name


def run_interactive(
    cli: GitHubCli,
    settings: Settings,
    *,
    name: str | None = None,
    description: str | None = None,
    visibility: Visibility | None = None,
    create_readme: bool | None = None,
    main_branch: str | None = None,
    clone: bool | None = None,
    assume_yes: bool = False,
    readme_template: bool = False,
) -> int:
    console = get_console()
    console.print("=" * 50)
    console.print("          Criador de Repositórios GitHub")
    console.print("=" * 50)
    console.print()

    check_prerequisites(cli)
    console.print()

    request = collect_request(
        cli,
        settings,
        name=name,
        description=description,
        visibility=visibility,
        create_readme=create_readme,
        main_branch=main_branch,
    )
    print_summary(request)
    console.print()

    if not assume_yes and not prompts.ask_proceed():
        print_status("Criação do repositório cancelada.")
        return 0

    create_repository(cli, request, settings, clone=clone, readme_template=readme_template)
    console.print()
    print_success("Pronto! Bom código! 🚀")
    return 0
