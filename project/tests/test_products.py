# tests/test_products.py

def test_catalog_starts_empty_in_memory(client):
    response = client.get("/api/products")
    assert response.status_code == 200
    assert response.json() == []


def test_create_sums_variant_stock(client, create_product):
    product = create_product(client)
    assert product["total_stock"] == 4
    assert [v["name"] for v in product["variants"]] == ["Red", "Blue"]
    assert all(v["id"] for v in product["variants"])
    assert product["images"] == ["https://example.com/a.jpg"]
    assert product["category_id"] is None


def test_create_without_variants_uses_manual_stock(client, create_product):
    product = create_product(client, variants=[], stock=7)
    assert product["total_stock"] == 7

    product = create_product(client, variants=[], totalStock=2)
    assert product["total_stock"] == 2

    product = create_product(client, variants=[])
    assert product["total_stock"] == 0


def test_create_keeps_client_variant_ids(client, create_product):
    product = create_product(client, variants=[{"id": "v1", "name": "Black", "stock": "5"}])
    assert product["variants"][0]["id"] == "v1"
    assert product["variants"][0]["stock"] == 5


def test_create_validation(client):
    assert client.post("/api/products", json={"name": "x", "price": 1}).status_code == 400
    assert client.post("/api/products", json={"name": "x", "description": "d"}).status_code == 400
    assert client.post("/api/products", json={"name": "x", "description": "d", "price": -1}).status_code == 400
    bad_variant = {"name": "x", "description": "d", "price": 1, "variants": [{"name": "Red", "stock": -2}]}
    assert client.post("/api/products", json=bad_variant).status_code == 400


def test_get_by_id(client, create_product):
    product = create_product(client)
    response = client.get(f"/api/products/{product['id']}")
    assert response.status_code == 200
    assert response.json()["name"] == product["name"]

    assert client.get("/api/products/unknown").status_code == 404


def test_update_price_keeps_variants(client, create_product):
    product = create_product(client)
    response = client.put(f"/api/products/{product['id']}", json={"price": "12.5"})
    assert response.status_code == 200
    body = response.json()
    assert body["price"] == 12.5
    assert body["variants"] == product["variants"]
    assert body["total_stock"] == 4


def test_update_variants_recomputes_total(client, create_product):
    product = create_product(client)
    variants = product["variants"]
    variants[0]["stock"] = 10
    response = client.put(f"/api/products/{product['id']}", json={"variants": variants, "total_stock": 999})
    assert response.status_code == 200
    assert response.json()["total_stock"] == 11


def test_update_manual_stock_without_variants(client, create_product):
    product = create_product(client, variants=[], stock=1)
    response = client.put(f"/api/products/{product['id']}", json={"total_stock": 9})
    assert response.json()["total_stock"] == 9


def test_update_category_can_be_cleared(client, create_product):
    product = create_product(client, category_id="c1")
    assert product["category_id"] == "c1"
    response = client.put(f"/api/products/{product['id']}", json={"category_id": None})
    assert response.json()["category_id"] is None


def test_update_missing_is_404(client):
    assert client.put("/api/products/none", json={"price": 1}).status_code == 404


def test_delete(client, create_product):
    product = create_product(client)
    assert client.delete(f"/api/products/{product['id']}").status_code == 204
    assert client.get(f"/api/products/{product['id']}").status_code == 404
    assert client.delete(f"/api/products/{product['id']}").status_code == 404


def test_clearing_variants_resets_stock(client, create_product):
    product = create_product(client)
    response = client.put(f"/api/products/{product['id']}", json={"variants": []})
    assert response.status_code == 200
    body = response.json()
    assert body["variants"] == []
    assert body["total_stock"] == 0

    response = client.put(f"/api/products/{product['id']}", json={"variants": [{"name": "Red", "stock": 2}]})
    assert response.json()["total_stock"] == 2

    response = client.put(f"/api/products/{product['id']}", json={"variants": [], "stock": 6})
    assert response.json()["total_stock"] == 6
