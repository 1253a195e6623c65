from __future__ import annotations

import asyncio
from decimal import Decimal
import logging
from pathlib import Path

import pytest
from aiohttp import test_utils, web

from config import Settings
from schemas.product import Plant, Product
from services.catalog_loader import CatalogFetchError, CatalogLoader, LoadStatus
from services.shop_session import ShopSession, create_session


def _ready_session(records) -> ShopSession:
    session = ShopSession(CatalogLoader.static(records))
    asyncio.run(session.load_catalog())
    return session


@pytest.fixture()
def session(fruit_records) -> ShopSession:
    return _ready_session(fruit_records)


def test_fruit_scenario(session):
    apple, banana = session.catalog

    session.select_category("Fruits")
    assert session.visible_products() == (apple, banana)

    view = session.catalog_view()
    assert view["count"] == 2
    assert [item["name"] for item in view["items"]] == ["Apple", "Banana"]

    session.add_to_basket(banana)
    session.add_to_basket(apple)
    assert [item.name for item in session.basket.items] == ["Banana", "Apple"]
    assert session.basket.total() == Decimal("2.25")

    session.remove_from_basket(banana)
    assert [item.name for item in session.basket.items] == ["Apple"]
    assert session.basket.total() == Decimal("1.50")
    assert session.basket_view()["total_display"] == "€1.50"


def test_empty_category_reports_zero(session):
    session.select_category("Flowers")

    assert session.visible_products() == ()
    assert session.catalog_view()["count"] == 0


def test_reset_category_shows_whole_catalog(session):
    session.select_category("Fruits")

    session.reset_category()

    assert session.selection.category is None
    assert session.visible_products() == session.catalog
    assert session.catalog_view()["items"] == []


def test_add_rejects_product_outside_catalog(fruit_catalog):
    empty = _ready_session([])

    with pytest.raises(ValueError):
        empty.add_to_basket(fruit_catalog[0])
    assert empty.basket.is_empty


def test_clear_basket(session):
    for product in session.catalog:
        session.add_to_basket(product)

    session.clear_basket()

    assert session.basket.total() == 0
    assert session.basket_view()["can_clear"] is False


def test_failed_load_keeps_catalog_empty():
    async def broken_source():
        raise CatalogFetchError("Catalog request failed with HTTP 503")

    failed = ShopSession(CatalogLoader(broken_source))
    asyncio.run(failed.load_catalog())

    assert failed.status is LoadStatus.ERROR
    assert failed.error == "Catalog request failed with HTTP 503"
    assert failed.catalog == ()
    assert failed.catalog_view()["total_products"] == 0


def test_basket_survives_repeated_load(session):
    apple = session.catalog[0]
    session.add_to_basket(apple)

    asyncio.run(session.load_catalog())

    assert session.status is LoadStatus.READY
    assert [item.pid for item in session.basket.items] == [apple.pid]


def test_from_settings_static_source():
    shop = ShopSession.from_settings(Settings(currency_symbol="$"))
    asyncio.run(shop.load_catalog())

    assert shop.status is LoadStatus.READY
    assert shop.currency == "$"
    assert len(shop.catalog) > 0


def test_from_settings_remote_requires_url():
    with pytest.raises(ValueError):
        ShopSession.from_settings(Settings(catalog_source="remote"))


def test_add_uses_catalog_product_for_known_pid(session):
    forged = Product(pid=1, type="Fruits", plant=Plant(name="Free Apple", price=0))

    session.add_to_basket(forged)

    assert session.basket.items[0] is session.catalog[0]
    assert session.basket.items[0].name == "Apple"
    assert session.basket.total() == Decimal("1.50")


def test_view_before_load_reports_idle(fruit_records):
    idle = ShopSession(CatalogLoader.static(fruit_records))

    view = idle.catalog_view()

    assert view["status"] == "idle"
    assert view["items"] == []


def test_failed_fetch_shows_error_view():
    async def handler(request):
        return web.Response(status=503, text="maintenance")

    async def _main():
        app = web.Application()
        app.router.add_get("/catalog.json", handler)
        server = test_utils.TestServer(app)
        await server.start_server()
        try:
            shop = ShopSession(CatalogLoader.remote(str(server.make_url("/catalog.json"))))
            await shop.load_catalog()
            return shop
        finally:
            await server.close()

    shop = asyncio.run(_main())
    shop.select_category("Fruits")
    view = shop.catalog_view()

    assert shop.catalog == ()
    assert view["status"] == "error"
    assert "HTTP 503" in view["error"]
    assert view["items"] == []
    assert shop.basket_view()["count"] == 0


def test_create_session_configures_logging(tmp_path: Path):
    log_file = tmp_path / "shop.log"
    settings = Settings(log_level=logging.DEBUG, log_file=log_file, currency_symbol="$")

    try:
        shop = create_session(settings)
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert shop.currency == "$"
        assert shop.status is LoadStatus.IDLE
        assert "catalog source=static" in log_file.read_text(encoding="utf-8")
    finally:
        logging.basicConfig(level=logging.WARNING, force=True)
