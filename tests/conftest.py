from __future__ import annotations

from pathlib import Path
import sys

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from schemas.product import Product
from services.catalog_loader import parse_catalog

FRUIT_RECORDS = [
    {"pid": 1, "type": "Fruits", "plant": {"name": "Apple", "price": 1.50}},
    {"pid": 2, "type": "Fruits", "plant": {"name": "Banana", "price": 0.75}},
]


@pytest.fixture()
def fruit_records() -> list[dict]:
    return [dict(record) for record in FRUIT_RECORDS]


@pytest.fixture()
def fruit_catalog(fruit_records) -> tuple[Product, ...]:
    return parse_catalog(fruit_records)


@pytest.fixture()
def mixed_catalog() -> tuple[Product, ...]:
    return parse_catalog(
        [
            {"pid": 1, "type": "Fruits", "plant": {"name": "banana", "price": 0.75}},
            {"pid": 2, "type": "Flowers", "plant": {"name": "Tulips", "price": 6.00}},
            {"pid": 3, "type": "Fruits", "plant": {"name": "Apple", "price": 1.50}},
            {"pid": 4, "type": "Fruits", "plant": {"name": "Pears", "price": 1.50}},
            {"pid": 5, "type": "Vegetables", "plant": {"name": "Carrots", "price": 1.20}},
        ]
    )
