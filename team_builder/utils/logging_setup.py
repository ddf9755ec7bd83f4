"""Logging del armador de equipos.

Uso:
    from team_builder.utils.logging_setup import setup_logging
    setup_logging()

Variables de entorno (mismo estilo que TEAM_DB_URL):
    TEAM_LOG_LEVEL  nombre de nivel (DEBUG, INFO, ...), por defecto INFO
    TEAM_LOG_DIR    si está definida, además se escribe team_builder.log ahí
"""
from __future__ import annotations
import logging
import logging.handlers
import os
from pathlib import Path
import sys

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'
LOG_FILE_NAME = 'team_builder.log'

def resolve_level(level: int | str | None = None) -> int:
    raw = level if level is not None else os.environ.get("TEAM_LOG_LEVEL", "INFO")
    if isinstance(raw, int):
        return raw
    value = logging.getLevelName(str(raw).strip().upper())
    return value if isinstance(value, int) else logging.INFO

def resolve_log_dir(log_dir: str | None = None) -> Path | None:
    raw = log_dir or os.environ.get("TEAM_LOG_DIR")
    return Path(raw) if raw else None

def setup_logging(level: int | str | None = None, log_to_file: bool | None = None, log_dir: str | None = None) -> Path | None:
    """Configura el logger raíz una sola vez. Devuelve la ruta del archivo de log, si hay."""
    root = logging.getLogger()
    if root.handlers:
        # ya configurado (tests, app embebida)
        return None
    lvl = resolve_level(level)
    root.setLevel(lvl)

    fmt = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(stream=sys.stdout)
    console.setFormatter(fmt)
    root.addHandler(console)

    # requests/urllib3 son muy verbosos en DEBUG
    logging.getLogger("urllib3").setLevel(max(lvl, logging.WARNING))

    path = resolve_log_dir(log_dir)
    if log_to_file is None:
        log_to_file = path is not None
    if not log_to_file:
        return None
    path = path or (Path.cwd() / 'logs')
    path.mkdir(parents=True, exist_ok=True)
    log_file = path / LOG_FILE_NAME
    fh = logging.handlers.RotatingFileHandler(log_file, maxBytes=2_000_000, backupCount=3, encoding='utf-8')
    fh.setFormatter(fmt)
    root.addHandler(fh)
    return log_file
