import pytest

from app import create_app
from config import TestConfig

API = "/api/v1"


@pytest.fixture
def app():
    return create_app(TestConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


def register(client, email="a@b.com", username="alice", password="secret1", **extra):
    body = {"email": email, "username": username, "password": password, **extra}
    return client.post(f"{API}/auth/register", json=body)


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(client):
    resp = register(client)
    assert resp.status_code == 201
    return bearer(resp.get_json()["token"])


@pytest.fixture
def btc(client, auth_headers):
    resp = client.post(
        f"{API}/assets",
        json={"name": "Bitcoin", "symbol": "BTC", "type": "cryptocurrency", "price": 50000},
        headers=auth_headers,
    )
    assert resp.status_code == 201
    return resp.get_json()
