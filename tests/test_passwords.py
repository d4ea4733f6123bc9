import pytest

from utils.errors import HashingError
from utils.passwords import PasswordHasher


@pytest.fixture
def hasher(app):
    return app.extensions["password_hasher"]


def test_hash_is_salted_bcrypt(hasher):
    first = hasher.hash("secret1")
    second = hasher.hash("secret1")
    assert first.startswith("$2")
    assert first != second
    assert "secret1" not in first


def test_verify_matches_only_the_original(hasher):
    digest = hasher.hash("secret1")
    assert hasher.verify(digest, "secret1") is True
    assert hasher.verify(digest, "secret2") is False


def test_verify_malformed_digest_is_a_mismatch(hasher):
    assert hasher.verify("not-a-bcrypt-hash", "secret1") is False


def test_empty_password_raises_hashing_error():
    with pytest.raises(HashingError):
        PasswordHasher().hash("")
