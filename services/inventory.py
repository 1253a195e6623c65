"""Встроенный ассортимент магазина (используется, когда каталог не грузится по сети)."""

from __future__ import annotations

from typing import Any

INVENTORY: list[dict[str, Any]] = [
    {"pid": 1, "type": "Vegetables", "plant": {"name": "Carrots", "price": 1.20}},
    {"pid": 2, "type": "Vegetables", "plant": {"name": "Potatoes", "price": 2.50}},
    {"pid": 3, "type": "Vegetables", "plant": {"name": "broccoli", "price": 1.75}},
    {"pid": 4, "type": "Vegetables", "plant": {"name": "Onions", "price": 0.95}},
    {"pid": 5, "type": "Flowers", "plant": {"name": "Tulips", "price": 6.00}},
    {"pid": 6, "type": "Flowers", "plant": {"name": "Roses", "price": 12.50}},
    {"pid": 7, "type": "Flowers", "plant": {"name": "Daffodils", "price": 4.00}},
    {"pid": 8, "type": "Fruits", "plant": {"name": "Apple", "price": 1.50}},
    {"pid": 9, "type": "Fruits", "plant": {"name": "Banana", "price": 0.75}},
    {"pid": 10, "type": "Fruits", "plant": {"name": "Strawberries", "price": 3.25}},
    {"pid": 11, "type": "Fruits", "plant": {"name": "Pears", "price": 1.50}},
]
