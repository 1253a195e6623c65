from __future__ import annotations

from typing import Any

from config import DEFAULT_CURRENCY_SYMBOL
from schemas.product import Product
from services.basket import Basket
from services.catalog import Catalog, filter_by_category, sort_by_name, sort_by_price
from services.catalog_loader import LoadStatus
from services.selection import CategorySelection
from utils.texts import (
    format_basket_summary,
    format_catalog_headline,
    format_category_title,
    format_price,
)


def _serialize_product(product: Product, currency: str) -> dict[str, Any]:
    return {
        "pid": product.pid,
        "type": product.type.value,
        "name": product.name,
        "price": product.price,
        "price_display": format_price(product.price, currency),
    }


def build_catalog_response(
    catalog: Catalog,
    selection: CategorySelection,
    *,
    status: LoadStatus = LoadStatus.READY,
    error: str | None = None,
    currency: str = DEFAULT_CURRENCY_SYMBOL,
) -> dict[str, Any]:
    """
    Снимок витрины.
    Пока каталог не загружен (или загрузка упала), вместо витрины отдаём статус и ошибку.
    Пока категория не выбрана, список товаров пуст.
    """

    response: dict[str, Any] = {
        "status": status.value,
        "error": None,
        "headline": None,
        "total_products": 0,
        "category": None,
        "title": None,
        "count": 0,
        "items": [],
    }

    if status is not LoadStatus.READY:
        if status is LoadStatus.ERROR:
            response["error"] = error or "Catalog is unavailable"
        return response

    response["total_products"] = len(catalog)
    response["headline"] = format_catalog_headline(len(catalog))
    if not selection.is_selected:
        return response

    products = filter_by_category(catalog, selection.category)
    response.update(
        {
            "category": selection.category.value,
            "title": format_category_title(selection.category.value, len(products)),
            "count": len(products),
            "items": [_serialize_product(product, currency) for product in sort_by_name(products)],
        }
    )
    return response


def build_basket_response(basket: Basket, *, currency: str = DEFAULT_CURRENCY_SYMBOL) -> dict[str, Any]:
    total = basket.total()
    total_display = format_price(total, currency)
    return {
        "items": [_serialize_product(product, currency) for product in sort_by_price(basket.items)],
        "count": basket.count(),
        "total": total,
        "total_display": total_display,
        "summary": format_basket_summary(basket.count(), total_display),
        "can_clear": not basket.is_empty,
    }
