# tests/test_system.py

def test_ping_returns_configured_message(client):
    response = client.get("/api/ping")
    assert response.status_code == 200
    assert response.json() == {"message": "ping"}


def test_demo(client):
    response = client.get("/api/demo")
    assert response.status_code == 200
    assert "message" in response.json()


def test_unknown_route_is_404(client):
    assert client.get("/api/nothing-here").status_code == 404
