import time
from datetime import timedelta

import jwt
import pytest

from utils.errors import InvalidToken
from utils.tokens import TokenService, get_token_service

SECRET = "test-secret-key-for-the-pytest-suite"


def _forge(claims, key=SECRET, algorithm="HS256"):
    base = {"type": "access", "fresh": False, "jti": "forged"}
    return jwt.encode({**base, **claims}, key, algorithm=algorithm)


def test_issue_then_validate_returns_subject(app_ctx):
    tokens = get_token_service()
    token = tokens.issue(42)
    assert token
    assert tokens.validate(token) == 42


def test_claims_carry_user_id_and_24h_lifetime(app_ctx):
    token = get_token_service().issue(7)
    claims = jwt.decode(token, SECRET, algorithms=["HS256"])
    assert claims["user_id"] == 7
    assert claims["exp"] - claims["iat"] == 86400


def test_expired_token_rejected_despite_valid_signature(app_ctx):
    issued = int(time.time()) - 25 * 3600
    token = _forge({"user_id": 1, "iat": issued, "nbf": issued, "exp": issued + 86400})
    with pytest.raises(InvalidToken, match="expired"):
        get_token_service().validate(token)


def test_wrong_secret_rejected(app_ctx):
    now = int(time.time())
    token = _forge({"user_id": 1, "iat": now, "nbf": now, "exp": now + 60}, key="another-secret-key-of-sufficient-length")
    with pytest.raises(InvalidToken):
        get_token_service().validate(token)


def test_none_algorithm_rejected(app_ctx):
    now = int(time.time())
    token = jwt.encode(
        {"user_id": 1, "iat": now, "nbf": now, "exp": now + 60, "type": "access"},
        "",
        algorithm="none",
    )
    with pytest.raises(InvalidToken):
        get_token_service().validate(token)


def test_other_hmac_algorithm_rejected(app_ctx):
    now = int(time.time())
    token = _forge({"user_id": 1, "iat": now, "nbf": now, "exp": now + 60}, algorithm="HS512")
    with pytest.raises(InvalidToken):
        get_token_service().validate(token)


@pytest.mark.parametrize("claims", [{}, {"user_id": "1"}, {"user_id": 0}, {"user_id": True}])
def test_missing_or_malformed_subject_rejected(app_ctx, claims):
    now = int(time.time())
    token = _forge({"iat": now, "nbf": now, "exp": now + 60, **claims})
    with pytest.raises(InvalidToken):
        get_token_service().validate(token)


def test_garbage_rejected(app_ctx):
    with pytest.raises(InvalidToken):
        get_token_service().validate("not-a-jwt")


def test_secret_is_injected_not_read_from_config(app):
    # The service signs with its own secret even if app config says otherwise
    app.config["JWT_SECRET_KEY"] = "changed-after-startup"
    with app.app_context():
        token = get_token_service().issue(3)
    assert jwt.decode(token, SECRET, algorithms=["HS256"])["user_id"] == 3


def test_requires_secret():
    with pytest.raises(ValueError):
        TokenService(secret="", ttl=timedelta(hours=1))
