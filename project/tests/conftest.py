# tests/conftest.py
#
# Окружение задаётся до импорта shopapi: settings читаются при импорте.

import os
import tempfile

_TMP = tempfile.mkdtemp(prefix="shopapi-tests-")

os.environ["DATABASE_URL"] = ""
os.environ["SUPABASE_URL"] = ""
os.environ["SUPABASE_SERVICE_ROLE_KEY"] = ""
os.environ["UPLOAD_DIR"] = os.path.join(_TMP, "uploads")
os.environ["LOG_DIR"] = os.path.join(_TMP, "log")
os.environ["LOG_PRINT"] = "0"
os.environ["ADMIN_LOGIN"] = "admin"
os.environ["ADMIN_PASSWORD"] = "secret"
os.environ["ADMIN_AUTH_REQUIRED"] = "false"
os.environ["AUTH_SECRET_KEY"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from shopapi.config import settings
from shopapi.main import app


@pytest.fixture
def client():
    """Приложение без базы: всё в памяти, демо-данные на месте."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_client(tmp_path, monkeypatch):
    """Приложение на SQLite через SQLAlchemy."""
    monkeypatch.setattr(settings, "DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'shop.db'}")
    with TestClient(app) as c:
        yield c


@pytest.fixture
def broken_db_client(tmp_path, monkeypatch):
    """База настроена, но открыть её нельзя: каталога не существует."""
    monkeypatch.setattr(settings, "DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'shop.db'}")
    with TestClient(app) as c:
        yield c


@pytest.fixture
def create_product():
    """Фабрика товаров через API."""
    return make_product


def make_product(client, **overrides):
    payload = {
        "name": "Wireless Headphones",
        "description": "Noise cancelling",
        "price": 10.0,
        "images": ["https://example.com/a.jpg"],
        "variants": [{"name": "Red", "stock": 3}, {"name": "Blue", "stock": 1}],
    }
    payload.update(overrides)
    response = client.post("/api/products", json=payload)
    assert response.status_code == 201, response.text
    return response.json()
