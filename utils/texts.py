from decimal import ROUND_HALF_UP, Decimal

from config import DEFAULT_CURRENCY_SYMBOL


def format_price(value: Decimal | float | int, currency: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    amount = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{currency}{amount}"


def format_catalog_headline(total_products: int) -> str:
    return f"We have {total_products} items for sale, right now!"


def format_category_title(category: str, count: int) -> str:
    return f"Our {category} products ({count} items)"


def format_basket_summary(count: int, total: str) -> str:
    return f"Your basket has {count} items. Total cost: {total}"
