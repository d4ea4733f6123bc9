import logging

from flask_bcrypt import Bcrypt

from utils.errors import HashingError

logger = logging.getLogger(__name__)


class PasswordHasher:
    """bcrypt hashing; the cost factor comes from BCRYPT_LOG_ROUNDS."""

    def __init__(self, bcrypt=None):
        self._bcrypt = bcrypt or Bcrypt()

    def init_app(self, app):
        self._bcrypt.init_app(app)
        app.extensions["password_hasher"] = self

    def hash(self, plaintext: str) -> str:
        try:
            return self._bcrypt.generate_password_hash(plaintext).decode("utf-8")
        except (ValueError, TypeError, MemoryError) as e:
            logger.error("Password hashing failed: %s", type(e).__name__)
            raise HashingError() from e

    def verify(self, digest: str, plaintext: str) -> bool:
        try:
            return self._bcrypt.check_password_hash(digest, plaintext)
        except (ValueError, TypeError):
            # Malformed digest or password; treat as a mismatch
            return False
