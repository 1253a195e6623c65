from __future__ import annotations

from typing import Callable, Iterable

from schemas.product import Category, Product

Catalog = tuple[Product, ...]


def normalize_category(value: Category | str | None) -> Category | None:
    if value is None or isinstance(value, Category):
        return value
    try:
        return Category(str(value).strip())
    except ValueError:
        raise ValueError(f"Unsupported category: {value!r}") from None


def filter_by_category(products: Iterable[Product], category: Category | str | None) -> Catalog:
    """Товары выбранной категории в исходном порядке; без выбора — весь каталог."""

    selected = normalize_category(category)
    if selected is None:
        return tuple(products)
    return tuple(product for product in products if product.type == selected)


def count_in_category(products: Iterable[Product], category: Category | str | None) -> int:
    return len(filter_by_category(products, category))


def sort_by_price(products: Iterable[Product]) -> Catalog:
    return tuple(sorted(products, key=lambda product: product.price))


def sort_by_name(products: Iterable[Product]) -> Catalog:
    return tuple(sorted(products, key=lambda product: product.name.lower()))


SORTERS: dict[str, Callable[[Iterable[Product]], Catalog]] = {
    "price": sort_by_price,
    "name": sort_by_name,
}


def sort_products(products: Iterable[Product], key: str) -> Catalog:
    sorter = SORTERS.get((key or "").strip().lower())
    if sorter is None:
        raise ValueError("sort key must be 'price' or 'name'")
    return sorter(products)


def find_product(products: Iterable[Product], pid: int) -> Product | None:
    for product in products:
        if product.pid == pid:
            return product
    return None
