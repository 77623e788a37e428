# tests/test_orders.py

import asyncio

import httpx

from shopapi.main import app


def _order(product, variant=None, quantity=1, price=10.0, **extra):
    item = {"productId": product["id"], "quantity": quantity, "price": price}
    if variant is not None:
        item["variantId"] = variant["id"]
    payload = {"customerId": "1", "items": [item]}
    payload.update(extra)
    return payload


def test_list_has_seeded_orders(client):
    orders = client.get("/api/orders").json()
    assert {o["id"] for o in orders} == {"1", "2"}
    order = next(o for o in orders if o["id"] == "1")
    assert order["customerId"] == "1"
    assert order["deliveryType"] == "delivery"
    assert order["items"][0]["productId"] == "1"


def test_create_adds_delivery_fee_and_decrements_variant(client, create_product):
    product = create_product(client)
    red = product["variants"][0]

    response = client.post("/api/orders", json=_order(product, red, quantity=2))
    assert response.status_code == 201
    order = response.json()
    assert order["total"] == 21.5
    assert order["status"] == "processing"
    assert order["deliveryType"] == "delivery"
    assert order["items"][0]["variantId"] == red["id"]

    stored = client.get(f"/api/products/{product['id']}").json()
    assert stored["variants"][0]["stock"] == 1
    assert stored["variants"][1]["stock"] == 1
    assert stored["total_stock"] == 2


def test_pickup_has_no_fee(client, create_product):
    product = create_product(client)
    response = client.post("/api/orders", json=_order(product, product["variants"][1], deliveryType="pickup"))
    assert response.status_code == 201
    assert response.json()["total"] == 10.0


def test_product_without_variants_uses_total_stock(client, create_product):
    product = create_product(client, variants=[], stock=5)
    response = client.post("/api/orders", json=_order(product, quantity=3, price=2.0, deliveryType="pickup"))
    assert response.status_code == 201
    assert response.json()["total"] == 6.0
    assert client.get(f"/api/products/{product['id']}").json()["total_stock"] == 2


def test_insufficient_stock_is_rejected_and_stock_untouched(client, create_product):
    product = create_product(client)
    blue = product["variants"][1]

    response = client.post("/api/orders", json=_order(product, blue, quantity=2))
    assert response.status_code == 400
    assert "Insufficient stock" in response.json()["detail"]

    stored = client.get(f"/api/products/{product['id']}").json()
    assert stored["variants"][1]["stock"] == 1
    assert len(client.get("/api/orders").json()) == 2


def test_repeated_lines_are_summed_for_stock_check(client, create_product):
    product = create_product(client)
    blue = product["variants"][1]
    payload = _order(product, blue, quantity=1)
    payload["items"].append(dict(payload["items"][0]))

    response = client.post("/api/orders", json=payload)
    assert response.status_code == 400


def test_unknown_product_or_variant(client, create_product):
    response = client.post("/api/orders", json={
        "customerId": "1", "items": [{"productId": "ghost", "quantity": 1, "price": 1}],
    })
    assert response.status_code == 400
    assert response.json()["detail"] == "Product ghost not found"

    product = create_product(client)
    response = client.post("/api/orders", json=_order(product, {"id": "no-such-variant"}))
    assert response.status_code == 400


def test_create_validation(client, create_product):
    assert client.post("/api/orders", json={"customerId": "1", "items": []}).status_code == 400
    assert client.post("/api/orders", json={"items": [{"productId": "1", "quantity": 1, "price": 1}]}).status_code == 400

    product = create_product(client)
    assert client.post("/api/orders", json=_order(product, product["variants"][0], quantity=0)).status_code == 400
    assert client.post("/api/orders", json=_order(product, product["variants"][0], deliveryType="drone")).status_code == 400


def test_update_status(client):
    response = client.put("/api/orders/2", json={"status": "ready"})
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ready"
    assert body["total"] == 17.5

    assert client.put("/api/orders/2", json={"status": "lost"}).status_code == 400


def test_update_items_recomputes_total(client):
    items = [{"productId": "1", "quantity": 2, "price": 5}]

    # самовывоз: без доставки
    assert client.put("/api/orders/2", json={"items": items}).json()["total"] == 10.0
    # доставка: +1.5
    assert client.put("/api/orders/1", json={"items": items}).json()["total"] == 11.5
    # смена типа в том же запросе
    body = client.put("/api/orders/1", json={"items": items, "deliveryType": "pickup"}).json()
    assert body["total"] == 10.0
    assert body["deliveryType"] == "pickup"


def test_update_does_not_touch_stock(client, create_product):
    product = create_product(client)
    order = client.post("/api/orders", json=_order(product, product["variants"][0])).json()
    client.put(f"/api/orders/{order['id']}", json={"items": [{"productId": product["id"], "quantity": 3, "price": 1}]})
    assert client.get(f"/api/products/{product['id']}").json()["total_stock"] == 3


def test_get_and_delete(client):
    assert client.get("/api/orders/1").json()["total"] == 35.0
    assert client.delete("/api/orders/1").status_code == 204
    assert client.get("/api/orders/1").status_code == 404
    assert client.delete("/api/orders/1").status_code == 404
    assert client.put("/api/orders/1", json={"status": "ready"}).status_code == 404


def test_storefront_default_variant_for_plain_product(client, create_product):
    product = create_product(client, variants=[], stock=5)
    payload = _order(product, {"id": "default"}, quantity=2, price=3.0, deliveryType="pickup")

    response = client.post("/api/orders", json=payload)
    assert response.status_code == 201, response.text
    assert response.json()["items"][0]["variantId"] == "default"
    assert client.get(f"/api/products/{product['id']}").json()["total_stock"] == 3


def test_variant_required_for_product_with_variants(client, create_product):
    product = create_product(client)

    response = client.post("/api/orders", json=_order(product, quantity=2))
    assert response.status_code == 400
    assert response.json()["detail"] == f"Variant required for product {product['name']}"

    stored = client.get(f"/api/products/{product['id']}").json()
    assert [v["stock"] for v in stored["variants"]] == [3, 1]
    assert stored["total_stock"] == 4


def test_delivery_type_change_recomputes_total(client, create_product):
    product = create_product(client)
    order = client.post("/api/orders", json=_order(product, product["variants"][0], quantity=2)).json()
    assert order["total"] == 21.5

    response = client.put(f"/api/orders/{order['id']}", json={"deliveryType": "pickup"})
    assert response.status_code == 200
    assert response.json()["total"] == 20.0

    response = client.put(f"/api/orders/{order['id']}", json={"deliveryType": "delivery"})
    assert response.json()["total"] == 21.5


def test_status_change_keeps_total(client):
    assert client.put("/api/orders/1", json={"status": "ready"}).json()["total"] == 35.0


def test_concurrent_orders_do_not_oversell():
    async def place_two_orders():
        async with app.router.lifespan_context(app):
            transport = httpx.ASGITransport(app=app)
            async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
                product = (await ac.post("/api/products", json={
                    "name": "Last Lamp", "description": "one left", "price": 5.0, "stock": 1,
                })).json()
                payload = _order(product, quantity=1, price=5.0, deliveryType="pickup")

                first, second = await asyncio.gather(
                    ac.post("/api/orders", json=payload),
                    ac.post("/api/orders", json=payload),
                )
                stored = (await ac.get(f"/api/products/{product['id']}")).json()
        return sorted([first.status_code, second.status_code]), stored["total_stock"]

    statuses, stock = asyncio.run(place_two_orders())
    assert statuses == [201, 400]
    assert stock == 0
