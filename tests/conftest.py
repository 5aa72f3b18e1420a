import os

import pytest

# Must be set before core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from core.config import settings
from database.connection import SessionLocal, get_db
from main import app


class BrokenSession:
    """Session whose every statement fails as if the database were down"""

    def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    query = _fail
    commit = _fail

    def add(self, obj):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


@pytest.fixture
def images_dir(tmp_path, monkeypatch):
    directory = tmp_path / "imgs"
    monkeypatch.setattr(settings, "IMAGES_DIR", str(directory))
    return directory


@pytest.fixture
def client(images_dir):
    # Startup creates the tables, shutdown disposes the in-memory database
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(client):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def broken_db(client):
    app.dependency_overrides[get_db] = lambda: BrokenSession()
    yield
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def product_payload():
    return {
        "name": "Lampara de escritorio",
        "description": "Lampara LED regulable",
        "category": "Hogar",
        "price": 19.99,
        "amazonPrice": 24.5,
        "availableQuantity": 3,
    }


@pytest.fixture
def product_id(client, product_payload):
    response = client.post("/productos", json=product_payload)
    assert response.status_code == 201
    return response.json()["id"]
