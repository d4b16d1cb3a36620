from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def emitted(monkeypatch):
    """Replace the Socket.IO emitter; the mock records every broadcast."""
    from storefront.realtime import sio

    emit = AsyncMock()
    monkeypatch.setattr(sio, "emit", emit)
    return emit


@pytest.fixture()
def client(emitted):
    from storefront.app import create_app

    return TestClient(create_app(), raise_server_exceptions=False)


@pytest.fixture()
def product_payload():
    def _payload(**overrides):
        payload = {
            "title": "Mechanical Keyboard",
            "description": "Tenkeyless keyboard",
            "code": "KB-001",
            "price": 89.9,
            "stock": 10,
            "category": "electronics",
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest.fixture()
def create_product(client, product_payload):
    """Add a product through the API and return its id."""

    def _create(**overrides):
        payload = product_payload(**overrides)
        response = client.post("/api/products", json=payload)
        assert response.status_code == 201
        listing = client.get("/api/products", params={"limit": 100}).json()
        return next(p["id"] for p in listing["payload"] if p["code"] == payload["code"])

    return _create
