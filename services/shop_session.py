"""Состояние одной сессии магазина: каталог, корзина и выбранная категория."""

from __future__ import annotations

import logging
from typing import Any

from config import DEFAULT_CURRENCY_SYMBOL, Settings, get_settings
from schemas.product import Category, Product
from services.basket import Basket
from services.catalog import Catalog, filter_by_category, find_product
from services.catalog_loader import CatalogLoader, LoadStatus
from services.responses import build_basket_response, build_catalog_response
from services.selection import CategorySelection
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


class ShopSession:
    def __init__(self, loader: CatalogLoader, *, currency: str = DEFAULT_CURRENCY_SYMBOL) -> None:
        self._loader = loader
        self.currency = currency
        self.basket = Basket()
        self.selection = CategorySelection()

    @classmethod
    def from_settings(cls, settings: Settings) -> "ShopSession":
        if settings.catalog_source == "remote":
            if not settings.catalog_url:
                raise ValueError("catalog_url is required for the remote catalog source")
            loader = CatalogLoader.remote(settings.catalog_url, timeout=settings.fetch_timeout)
        else:
            loader = CatalogLoader.static()
        return cls(loader, currency=settings.currency_symbol)

    @property
    def catalog(self) -> Catalog:
        return self._loader.catalog

    @property
    def status(self) -> LoadStatus:
        return self._loader.status

    @property
    def error(self) -> str | None:
        return self._loader.error

    async def load_catalog(self) -> LoadStatus:
        return await self._loader.load()

    def select_category(self, category: Category | str) -> CategorySelection:
        self.selection = self.selection.choose(category)
        return self.selection

    def reset_category(self) -> CategorySelection:
        self.selection = self.selection.reset()
        return self.selection

    def add_to_basket(self, product: Product) -> Basket:
        # В корзину кладём экземпляр из каталога, а не то, что передал вызывающий код
        catalog_product = find_product(self.catalog, product.pid)
        if catalog_product is None:
            raise ValueError(f"Product {product.pid} is not in the catalog")
        self.basket = self.basket.add(catalog_product)
        return self.basket

    def remove_from_basket(self, product: Product) -> Basket:
        self.basket = self.basket.remove(product)
        return self.basket

    def clear_basket(self) -> Basket:
        logger.debug("Clearing basket with %s items", self.basket.count())
        self.basket = self.basket.clear()
        return self.basket

    def visible_products(self) -> Catalog:
        return filter_by_category(self.catalog, self.selection.category)

    def catalog_view(self) -> dict[str, Any]:
        return build_catalog_response(
            self.catalog,
            self.selection,
            status=self.status,
            error=self.error,
            currency=self.currency,
        )

    def basket_view(self) -> dict[str, Any]:
        return build_basket_response(self.basket, currency=self.currency)


def create_session(settings: Settings | None = None) -> ShopSession:
    """Точка входа: настройки из .env, логирование и сессия с нужным источником каталога."""

    settings = settings or get_settings()
    setup_logging(settings.log_level, log_file=settings.log_file)
    logger.info("Starting shop session, catalog source=%s", settings.catalog_source)
    return ShopSession.from_settings(settings)
