from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from .. import logs as logs_mod
from ..output import get_console


def register(subparsers) -> None:
    parser = subparsers.add_parser("logs", help="Lista, inspeciona e limpa logs de execução")
    parser.add_argument("--limit", dest="logs_limit", type=int, default=20, help="Quantidade de execuções exibidas.")
    parser.add_argument("--show", dest="logs_show", help="Exibe o conteúdo do log para o run-id informado.")
    parser.add_argument("--tail", dest="logs_tail", type=int, default=0, help="Mostra só as últimas N linhas ao exibir um log.")
    parser.add_argument("--clean-days", dest="logs_clean_days", type=int, help="Remove logs mais antigos que N dias.")
    parser.set_defaults(handler=_run, run_log=False)


def _run(args, settings) -> int:
    console = get_console()
    entries = logs_mod.list_logs(settings.log_dir, limit=args.logs_limit)
    if entries:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Run ID", overflow="fold")
        table.add_column("Data/Hora")
        table.add_column("Tamanho")
        table.add_column("Resultado", overflow="fold")
        for entry in entries:
            size_kb = entry.size_bytes / 1024
            table.add_row(entry.run_id, f"{entry.mtime:%Y-%m-%d %H:%M:%S}", f"{size_kb:8.1f} KB", escape(entry.result))
        console.print(table)
    else:
        console.print(f"Nenhum log em {settings.log_dir}.", markup=False)

    if args.logs_show:
        try:
            content = logs_mod.show_log(
                settings.log_dir,
                args.logs_show,
                tail=args.logs_tail > 0,
                lines=args.logs_tail if args.logs_tail > 0 else 50,
            )
            result = logs_mod.summarize_run(settings.log_dir / f"{args.logs_show}.log")
            console.print(f"\n[bold]== Log {escape(args.logs_show)} ({escape(result)}) ==[/bold]")
            console.print(content, markup=False)
        except FileNotFoundError as exc:
            console.print(str(exc), markup=False)

    if args.logs_clean_days:
        deleted = logs_mod.cleanup_logs(settings.log_dir, args.logs_clean_days)
        if deleted:
            console.print(f"Logs removidos: {', '.join(deleted)}")
        else:
            console.print("Nenhum log removido.")
    return 0
