"""Загрузка каталога: из встроенного списка или одним запросом к удалённому JSON."""

from __future__ import annotations

import asyncio
import json
import logging
from enum import Enum
from typing import Any, Awaitable, Callable

import aiohttp
from pydantic import TypeAdapter, ValidationError

from schemas.product import Product
from services.catalog import Catalog
from services.inventory import INVENTORY

logger = logging.getLogger(__name__)

_PRODUCTS_ADAPTER = TypeAdapter(list[Product])


class CatalogLoadError(Exception):
    """Каталог не удалось получить; каталог сессии остаётся пустым."""


class CatalogFetchError(CatalogLoadError):
    pass


class CatalogParseError(CatalogLoadError):
    pass


class LoadStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


def parse_catalog(data: Any) -> Catalog:
    if not isinstance(data, list):
        raise CatalogParseError("Catalog document must be a JSON array")
    try:
        products = _PRODUCTS_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise CatalogParseError(f"Catalog records do not match the product shape: {exc.error_count()} error(s)") from exc
    return tuple(products)


def load_static_catalog(records: list[dict[str, Any]] | None = None) -> Catalog:
    return parse_catalog(INVENTORY if records is None else records)


async def fetch_catalog(url: str, *, timeout: float | None = None) -> Catalog:
    client_timeout = aiohttp.ClientTimeout(total=timeout)
    try:
        async with aiohttp.ClientSession(timeout=client_timeout) as session:
            async with session.get(url) as response:
                if response.status >= 400:
                    raise CatalogFetchError(f"Catalog request failed with HTTP {response.status}")
                data = await response.json(content_type=None)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CatalogParseError("Catalog response is not valid JSON") from exc
    except asyncio.TimeoutError as exc:
        raise CatalogFetchError("Catalog request timed out") from exc
    except aiohttp.ClientError as exc:
        raise CatalogFetchError(f"Catalog request failed: {exc}") from exc
    return parse_catalog(data)


class CatalogLoader:
    """
    Однократная загрузка каталога.
    Состояния: idle → loading → ready | error. После завершения повторных запросов нет.
    """

    def __init__(self, source: Callable[[], Awaitable[Catalog]]) -> None:
        self._source = source
        self.status = LoadStatus.IDLE
        self.catalog: Catalog = ()
        self.error: str | None = None

    @classmethod
    def static(cls, records: list[dict[str, Any]] | None = None) -> "CatalogLoader":
        async def _source() -> Catalog:
            return load_static_catalog(records)

        return cls(_source)

    @classmethod
    def remote(cls, url: str, *, timeout: float | None = None) -> "CatalogLoader":
        async def _source() -> Catalog:
            return await fetch_catalog(url, timeout=timeout)

        return cls(_source)

    @property
    def is_resolved(self) -> bool:
        return self.status in {LoadStatus.READY, LoadStatus.ERROR}

    async def load(self) -> LoadStatus:
        if self.status is not LoadStatus.IDLE:
            logger.debug("Catalog load already attempted, status=%s", self.status.value)
            return self.status

        self.status = LoadStatus.LOADING
        try:
            catalog = await self._source()
        except CatalogLoadError as exc:
            logger.warning("Catalog load failed: %s", exc)
            self.error = str(exc)
            self.status = LoadStatus.ERROR
            return self.status
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected error during catalog load")
            self.error = f"Catalog load failed: {exc}"
            self.status = LoadStatus.ERROR
            return self.status

        self.catalog = catalog
        self.status = LoadStatus.READY
        logger.info("Catalog loaded: %s products", len(catalog))
        return self.status
