import time

import jwt
import pytest

from conftest import API, bearer
from config import TestConfig


def _signed(claims):
    now = int(time.time())
    base = {"type": "access", "fresh": False, "jti": "t1", "iat": now, "nbf": now, "exp": now + 60}
    return jwt.encode({**base, **claims}, TestConfig.JWT_SECRET_KEY, algorithm="HS256")


def test_missing_header_is_401(client):
    resp = client.get(f"{API}/assets")
    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Unauthorized", "message": "Authorization header required"}


def test_header_without_bearer_prefix_is_401(client, auth_headers):
    token = auth_headers["Authorization"].split(" ", 1)[1]
    resp = client.get(f"{API}/assets", headers={"Authorization": f"Token {token}"})
    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Invalid authorization header format"


def test_invalid_token_is_401(client):
    resp = client.get(f"{API}/assets", headers=bearer("abc.def.ghi"))
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "Invalid token"


def test_valid_token_passes(client, auth_headers):
    resp = client.get(f"{API}/assets", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json() == []


def test_auth_routes_and_health_are_public(client):
    assert client.get("/health").get_json() == {"status": "ok"}
    resp = client.post(f"{API}/auth/login", json={"email": "x@y.com", "password": "whatever"})
    assert resp.status_code == 401


def test_expired_token_is_401(client, auth_headers):
    issued = int(time.time()) - 25 * 3600
    token = _signed({"user_id": 1, "iat": issued, "nbf": issued, "exp": issued + 86400})
    resp = client.get(f"{API}/assets", headers=bearer(token))
    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Invalid token", "message": "Token has expired"}


@pytest.mark.parametrize("user_id", ["1", 0, True])
def test_token_with_malformed_user_id_is_401(client, auth_headers, user_id):
    resp = client.get(f"{API}/assets", headers=bearer(_signed({"user_id": user_id})))
    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Invalid token", "message": "Invalid token claims"}


def test_token_without_user_id_is_401(client, auth_headers):
    resp = client.get(f"{API}/assets", headers=bearer(_signed({})))
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "Invalid token"


def test_bearer_token_from_another_key_is_401(client, auth_headers):
    now = int(time.time())
    token = jwt.encode(
        {"user_id": 1, "type": "access", "iat": now, "nbf": now, "exp": now + 60},
        "another-secret-key-of-sufficient-length",
        algorithm="HS256",
    )
    resp = client.get(f"{API}/assets", headers=bearer(token))
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "Invalid token"
