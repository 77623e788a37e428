# tests/test_customers.py

def test_list_has_seeded_customers(client):
    response = client.get("/api/customers")
    assert response.status_code == 200
    customers = response.json()
    assert [c["name"] for c in customers] == ["Alice Johnson", "Bob Smith", "Carol Davis"]
    assert "createdAt" in customers[0]
    assert "updatedAt" in customers[0]


def test_create_echoes_payload(client):
    payload = {"name": "Dana", "phone": "+973-1111", "address": "Manama"}
    response = client.post("/api/customers", json=payload)
    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Dana"
    assert body["phone"] == "+973-1111"
    assert body["address"] == "Manama"
    assert body["id"]

    ids = [c["id"] for c in client.get("/api/customers").json()]
    assert body["id"] in ids


def test_create_composes_address_from_parts(client):
    payload = {"name": "Eve", "phone": "123", "home": "12", "road": "7", "block": "301", "town": "Riffa"}
    response = client.post("/api/customers", json=payload)
    assert response.status_code == 201
    assert response.json()["address"] == "House 12, Road 7, Block 301, Riffa"


def test_create_requires_name_phone_address(client):
    response = client.post("/api/customers", json={"name": "No phone"})
    assert response.status_code == 400

    response = client.post("/api/customers", json={"name": "", "phone": "1", "address": "x"})
    assert response.status_code == 400


def test_get_by_id(client):
    response = client.get("/api/customers/2")
    assert response.status_code == 200
    assert response.json()["name"] == "Bob Smith"

    assert client.get("/api/customers/nope").status_code == 404


def test_update_merges_partial_fields(client):
    response = client.put("/api/customers/1", json={"name": "Alice J."})
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Alice J."
    assert body["phone"] == "+1 (555) 123-4567"
    assert body["updatedAt"] != body["createdAt"]


def test_update_missing_is_404(client):
    response = client.put("/api/customers/missing", json={"name": "x"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Customer not found"


def test_delete(client):
    response = client.delete("/api/customers/3")
    assert response.status_code == 204
    assert response.content == b""

    assert client.delete("/api/customers/3").status_code == 404
    assert len(client.get("/api/customers").json()) == 2
