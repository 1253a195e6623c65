"""Общая настройка логирования для сессии магазина."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path


def _build_file_handler(path: Path, max_bytes: int = 5_000_000, backups: int = 3) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path,
        maxBytes=max_bytes,
        backupCount=backups,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    return handler


def setup_logging(level: int = logging.INFO, *, log_file: Path | None = None) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if log_file:
        handlers.append(_build_file_handler(log_file))

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )

    # aiohttp слишком разговорчив на DEBUG
    logging.getLogger("aiohttp").setLevel(max(level, logging.INFO))
