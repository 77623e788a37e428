# tests/test_storage.py
#
# Хранилище в памяти и расчёты без HTTP.

from shopapi.schemas.order import OrderItem
from shopapi.services.order import calculate_total
from shopapi.services.product import available_stock, compute_total_stock, decrement_stock
from shopapi.utils.fallback import FallbackStorage
from shopapi.utils.ids import generate_id


def test_fallback_seed():
    storage = FallbackStorage()
    assert len(storage.all("customers")) == 3
    assert len(storage.all("orders")) == 2
    assert storage.all("products") == []

    assert FallbackStorage(seed=False).all("customers") == []


def test_fallback_returns_copies():
    storage = FallbackStorage()
    customer = storage.get("customers", "1")
    customer["name"] = "changed"
    assert storage.get("customers", "1")["name"] == "Alice Johnson"


def test_fallback_ids_are_trimmed():
    storage = FallbackStorage()
    assert storage.get("customers", " 2 ")["name"] == "Bob Smith"


def test_fallback_update_and_delete():
    storage = FallbackStorage()
    updated = storage.update("customers", "1", {"phone": "000"})
    assert updated["phone"] == "000"
    assert updated["name"] == "Alice Johnson"
    assert storage.update("customers", "missing", {"phone": "1"}) is None

    assert storage.delete("orders", "1") is True
    assert storage.delete("orders", "1") is False
    assert [o["id"] for o in storage.all("orders")] == ["2"]


def test_generate_id_is_unique():
    ids = {generate_id() for _ in range(100)}
    assert len(ids) == 100
    assert all(len(i) == 22 for i in ids)


def test_calculate_total():
    items = [OrderItem(productId="1", quantity=2, price=10), OrderItem(productId="2", quantity=1, price=0.1)]
    assert calculate_total(items, "delivery") == 21.6
    assert calculate_total(items, "pickup") == 20.1


def test_compute_total_stock():
    assert compute_total_stock([{"stock": 2}, {"stock": 3}], 100) == 5
    assert compute_total_stock([], 7) == 7
    assert compute_total_stock([], None) == 0


def test_available_and_decrement_stock():
    product = {
        "id": "p",
        "total_stock": 5,
        "variants": [{"id": "a", "name": "A", "stock": 2}, {"id": "b", "name": "B", "stock": 3}],
    }
    assert available_stock(product, "a") == 2
    assert available_stock(product, "zzz") is None
    assert available_stock(product, None) is None
    assert available_stock({"total_stock": 4, "variants": []}, "default") == 4

    values = decrement_stock(product, "b", 2)
    assert values["variants"][1]["stock"] == 1
    assert values["total_stock"] == 3
    # исходный товар не меняется
    assert product["variants"][1]["stock"] == 3

    assert decrement_stock({"id": "q", "total_stock": 1, "variants": []}, None, 4)["total_stock"] == 0


def test_decrement_without_variants_ignores_variant_id():
    values = decrement_stock({"id": "q", "total_stock": 5, "variants": []}, "default", 2)
    assert values["total_stock"] == 3
    assert "variants" not in values
