from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import List
from uuid import uuid4

LOGGER = logging.getLogger("ghrepo")

_CREATED_MARKERS = ("URL do repositório: ", "Repositório criado: ")
_CANCEL_MARKERS = ("Operação cancelada.", "Criação do repositório cancelada.")


@dataclass
class LogEntry:
    run_id: str
    log_path: Path
    mtime: datetime
    size_bytes: int
    result: str = ""


def generate_run_id() -> str:
    return f"create-{datetime.now():%Y%m%d-%H%M%S}-{uuid4().hex[:6]}"


def setup_run_logger(log_dir: Path, run_id: str) -> Path:
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / f"{run_id}.log"
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
    close_run_logger()
    LOGGER.addHandler(handler)
    LOGGER.setLevel(logging.INFO)
    LOGGER.propagate = False
    return log_path


def close_run_logger() -> None:
    for handler in list(LOGGER.handlers):
        if isinstance(handler, logging.FileHandler):
            LOGGER.removeHandler(handler)
            handler.close()


def summarize_run(log_path: Path) -> str:
    """
    Resume o desfecho de uma execução a partir do seu log: a URL (ou OWNER/NOME)
    do repositório criado, 'cancelada', 'falhou' ou 'incompleta'.
    """
    try:
        lines = log_path.read_text(encoding="utf-8", errors="ignore").splitlines()
    except FileNotFoundError:
        return "incompleta"
    failed = False
    for line in lines:
        for marker in _CREATED_MARKERS:
            if marker in line:
                return line.split(marker, 1)[1].strip()
        if any(marker in line for marker in _CANCEL_MARKERS):
            return "cancelada"
        if "[ERROR]" in line:
            failed = True
    return "falhou" if failed else "incompleta"


def _iter_logs(log_dir: Path) -> List[LogEntry]:
    if not log_dir.exists():
        return []
    entries: List[LogEntry] = []
    for log_file in log_dir.glob("*.log"):
        try:
            stat = log_file.stat()
        except FileNotFoundError:
            continue
        entries.append(
            LogEntry(
                run_id=log_file.stem,
                log_path=log_file,
                mtime=datetime.fromtimestamp(stat.st_mtime),
                size_bytes=stat.st_size,
                result=summarize_run(log_file),
            )
        )
    entries.sort(key=lambda e: e.mtime, reverse=True)
    return entries


def list_logs(log_dir: Path, limit: int | None = None) -> List[LogEntry]:
    entries = _iter_logs(log_dir)
    if limit is not None:
        entries = entries[:limit]
    return entries


def show_log(log_dir: Path, run_id: str, tail: bool = False, lines: int = 50) -> str:
    log_path = log_dir / f"{run_id}.log"
    if not log_path.exists():
        raise FileNotFoundError(f"Log {log_path} não encontrado")
    content = log_path.read_text(encoding="utf-8", errors="ignore").splitlines()
    if tail and lines > 0:
        content = content[-lines:]
    return "\n".join(content)


def cleanup_logs(log_dir: Path, max_days: int) -> list[str]:
    """Remove logs mais antigos que max_days e retorna os run-ids apagados."""
    deleted: list[str] = []
    if max_days <= 0:
        return deleted
    cutoff = datetime.now() - timedelta(days=max_days)
    for entry in _iter_logs(log_dir):
        if entry.mtime < cutoff:
            entry.log_path.unlink(missing_ok=True)
            deleted.append(entry.run_id)
    return deleted
