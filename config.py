from dataclasses import dataclass
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Загружаем .env один раз при импорте модуля
load_dotenv()

CATALOG_SOURCES = {"static", "remote"}
DEFAULT_CURRENCY_SYMBOL = "€"


@dataclass
class Settings:
    catalog_source: str = "static"
    catalog_url: str | None = None
    # None — без таймаута, запрос ждёт ответа сколько угодно
    fetch_timeout: float | None = None
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    log_level: int = logging.INFO
    log_file: Path | None = None


def _load_fetch_timeout() -> float | None:
    raw = os.getenv("CATALOG_FETCH_TIMEOUT", "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError("CATALOG_FETCH_TIMEOUT must be a number of seconds") from None
    if value <= 0:
        raise ValueError("CATALOG_FETCH_TIMEOUT must be positive")
    return value


def _load_log_level() -> int:
    raw = os.getenv("LOG_LEVEL", "").strip().upper()
    if not raw:
        return logging.INFO
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ValueError(f"Unknown LOG_LEVEL: {raw}")
    return level


def get_settings() -> Settings:
    """
    Возвращает объект настроек из переменных окружения:
    - CATALOG_SOURCE (static | remote)
    - CATALOG_URL (обязателен для remote)
    - CATALOG_FETCH_TIMEOUT
    - CURRENCY_SYMBOL
    - LOG_LEVEL / LOG_FILE
    """
    source = (os.getenv("CATALOG_SOURCE") or "static").strip().lower()
    if source not in CATALOG_SOURCES:
        raise ValueError("CATALOG_SOURCE must be 'static' or 'remote'")

    catalog_url = os.getenv("CATALOG_URL", "").strip() or None
    if source == "remote" and not catalog_url:
        raise ValueError("Не найден CATALOG_URL для CATALOG_SOURCE=remote")

    log_file_raw = os.getenv("LOG_FILE", "").strip()

    return Settings(
        catalog_source=source,
        catalog_url=catalog_url,
        fetch_timeout=_load_fetch_timeout(),
        currency_symbol=os.getenv("CURRENCY_SYMBOL") or DEFAULT_CURRENCY_SYMBOL,
        log_level=_load_log_level(),
        log_file=Path(log_file_raw) if log_file_raw else None,
    )
