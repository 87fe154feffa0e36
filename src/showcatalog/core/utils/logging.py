"""Logging de ShowCatalog : console + fichier optionnel, niveau lu depuis la configuration."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGER = "showcatalog"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# httpx journalise chaque requête en INFO ; on ne les garde qu'en DEBUG.
_CHATTY_LOGGERS = ("httpx", "httpcore")


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level or "INFO").strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: str | int | None = "INFO",
    log_file: Path | str | None = None,
) -> logging.Logger:
    """
    Configure le logging racine pour l'application et retourne le logger 'showcatalog'.

    `level` accepte un nom ("debug", "WARNING"...) tel qu'écrit dans le fichier de
    configuration, ou un niveau numérique ; un nom inconnu retombe sur INFO.
    Un second appel remplace les handlers au lieu de les dupliquer.
    """
    numeric_level = _resolve_level(level)
    formatter = logging.Formatter(DEFAULT_FORMAT)
    root = logging.getLogger()
    root.setLevel(numeric_level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    http_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(http_level)

    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(numeric_level)
    return logger
