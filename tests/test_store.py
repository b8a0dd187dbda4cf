# tests/test_store.py
import pytest

from app.database import ProductStore
from app.errors import ValidationError
from app.models import Product


def test_seeded_store_has_three_products(store):
    assert [p.id for p in store.list()] == ["1", "2", "3"]
    assert len(store) == 3


def test_seeded_stores_are_independent():
    a = ProductStore.seeded()
    b = ProductStore.seeded()
    a.remove("1")
    assert b.get("1") is not None


def test_list_returns_a_copy(store):
    snapshot = store.list()
    store.remove("2")
    assert len(snapshot) == 3


def test_insert_and_get():
    s = ProductStore()
    s.insert(Product(id="x", name="Desk", price=150))
    assert s.get("x").name == "Desk"
    assert s.get("missing") is None


def test_replace_merges(store):
    updated = store.replace("2", {"price": 750, "color": "black"})
    assert updated.price == 750
    assert updated.name == "Smartphone"
    assert updated.to_dict()["color"] == "black"
    assert store.get("2") is updated


def test_replace_missing(store):
    assert store.replace("nope", {"price": 1}) is None


def test_replace_with_bad_type_leaves_record(store):
    with pytest.raises(ValidationError):
        store.replace("1", {"price": "lots"})
    assert store.get("1").price == 1200


def test_remove(store):
    removed = store.remove("1")
    assert removed.name == "Laptop"
    assert store.remove("1") is None
    assert [p.id for p in store.list()] == ["2", "3"]


def test_product_to_dict_uses_wire_names():
    p = Product.model_validate({"id": "a", "name": "Mug", "price": 3.5, "inStock": False, "size": "L"})
    assert p.inStock is False
    assert p.to_dict() == {"id": "a", "name": "Mug", "price": 3.5, "inStock": False, "size": "L"}


def test_product_keeps_int_price():
    p = Product.model_validate({"id": "a", "name": "Mug", "price": 3})
    assert p.to_dict()["price"] == 3
    assert isinstance(p.to_dict()["price"], int)


def test_from_payload_reports_field():
    with pytest.raises(ValidationError) as exc:
        Product.from_payload({"id": "a", "name": ["not", "a", "string"], "price": 1})
    assert "name" in exc.value.message
