# tests/test_client.py
import asyncio

import httpx
import pytest
import requests

from conftest import ASGISessionAdapter
from sdk.pyproducts import ProductClient

BASE = "http://testserver"


@pytest.fixture
def sdk(app, client):
    c = ProductClient(base_url=BASE, async_transport=httpx.ASGITransport(app=app))
    c.session.mount(BASE, ASGISessionAdapter(client))
    return c


def test_list_and_filter(sdk):
    assert sdk.list_products()["total"] == 3
    page = sdk.list_products(category="Kitchen", page=1, limit=5)
    assert [p["name"] for p in page["products"]] == ["Coffee Maker"]


def test_search_and_stats(sdk):
    assert [p["id"] for p in sdk.search_products("lap")] == ["1"]
    assert sdk.stats()["countByCategory"] == {"electronics": 2, "kitchen": 1}


def test_crud_round(sdk):
    created = sdk.create_product("Desk", 150, category="furniture", color="oak")
    assert sdk.get_product(created["id"]) == created

    updated = sdk.update_product(created["id"], "Desk", 120)
    assert updated["price"] == 120
    assert updated["color"] == "oak"

    deleted = sdk.delete_product(created["id"])
    assert deleted["deletedProduct"] == [updated]
    with pytest.raises(requests.HTTPError) as exc:
        sdk.get_product(created["id"])
    assert exc.value.response.status_code == 404


def test_bad_key_raises(app, client):
    c = ProductClient(base_url=BASE, api_key="wrong")
    c.session.mount(BASE, ASGISessionAdapter(client))
    with pytest.raises(requests.HTTPError) as exc:
        c.stats()
    assert exc.value.response.status_code == 401


def test_async_create(sdk, store):
    async def run():
        return await asyncio.gather(*(sdk.create_product_async(f"W{i}", i + 1) for i in range(5)))

    products = asyncio.run(run())
    assert len({p["id"] for p in products}) == 5
    assert len(store) == 8
