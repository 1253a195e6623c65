"""In-memory корзина покупателя.

Корзина неизменяема: каждая операция возвращает новый объект, поэтому
ранее сохранённые снимки не портятся последующими изменениями.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from schemas.product import Product

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Basket:
    items: tuple[Product, ...] = ()

    def add(self, product: Product) -> "Basket":
        # Дубликаты разрешены: один и тот же товар можно положить несколько раз.
        logger.debug("Adding pid=%s to basket", product.pid)
        return Basket(items=self.items + (product,))

    def remove(self, product: Product) -> "Basket":
        for index, item in enumerate(self.items):
            if item.pid == product.pid:
                logger.debug("Removing pid=%s from basket at position %s", product.pid, index)
                return Basket(items=self.items[:index] + self.items[index + 1 :])
        return self

    def clear(self) -> "Basket":
        return Basket()

    def total(self) -> Decimal:
        return sum((item.price for item in self.items), Decimal("0"))

    def count(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items
