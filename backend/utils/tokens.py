"""
Bearer token issuance and validation.

Tokens are HS256 JWTs minted by flask-jwt-extended. The signing secret is
handed to ``TokenService`` once at startup and fed to the JWT manager through
its key loaders, so nothing here reads the environment at request time.
Claims: ``user_id``, ``iat``, ``nbf``, ``exp`` (``iat`` + ttl), ``jti`` and
``type``. Rejections raised by flask-jwt-extended during request
verification are rendered through the same error body as the rest of the API.
"""

import logging
from datetime import timedelta

import jwt
from flask import current_app, jsonify, request
from flask_jwt_extended import JWTManager, create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException

from utils.errors import InvalidToken, UnauthorizedError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
IDENTITY_CLAIM = "user_id"


class TokenService:
    def __init__(self, secret: str, ttl: timedelta = timedelta(hours=24), algorithm: str = ALGORITHM):
        if not secret:
            raise ValueError("TokenService requires a signing secret")
        self._secret = secret
        self.ttl = ttl
        self.algorithm = algorithm
        self.jwt = JWTManager()

    def init_app(self, app):
        app.config["JWT_ALGORITHM"] = self.algorithm
        # Only the configured HMAC algorithm is accepted on decode, which
        # rules out "none" and asymmetric algorithms.
        app.config["JWT_DECODE_ALGORITHMS"] = [self.algorithm]
        app.config["JWT_IDENTITY_CLAIM"] = IDENTITY_CLAIM
        app.config["JWT_ACCESS_TOKEN_EXPIRES"] = self.ttl
        app.config["JWT_TOKEN_LOCATION"] = ["headers"]

        self.jwt.init_app(app)
        self.jwt.encode_key_loader(lambda identity: self._secret)
        self.jwt.decode_key_loader(lambda jwt_header, jwt_data: self._secret)

        self.jwt.token_verification_loader(lambda jwt_header, jwt_data: valid_subject(jwt_data.get(IDENTITY_CLAIM)))
        self.jwt.unauthorized_loader(_unauthorized)
        self.jwt.invalid_token_loader(lambda reason: _reject(InvalidToken(), reason))
        self.jwt.expired_token_loader(lambda jwt_header, jwt_data: _reject(InvalidToken("Token has expired"), "expired"))
        self.jwt.token_verification_failed_loader(
            lambda jwt_header, jwt_data: _reject(InvalidToken("Invalid token claims"), "bad subject")
        )

        app.extensions["token_service"] = self

    def issue(self, user_id: int) -> str:
        """Sign a token for ``user_id``. Needs an app context."""
        return create_access_token(identity=user_id, expires_delta=self.ttl)

    def validate(self, token: str) -> int:
        """Return the user id carried by ``token`` or raise InvalidToken."""
        try:
            claims = decode_token(token)
        except jwt.ExpiredSignatureError as e:
            raise InvalidToken("Token has expired") from e
        except (jwt.PyJWTError, JWTExtendedException) as e:
            logger.debug("Token rejected: %s", e)
            raise InvalidToken() from e

        user_id = claims.get(IDENTITY_CLAIM)
        if not valid_subject(user_id):
            raise InvalidToken("Invalid token claims")
        return user_id


def get_token_service() -> TokenService:
    return current_app.extensions["token_service"]


def valid_subject(user_id) -> bool:
    # bool is an int subclass
    return isinstance(user_id, int) and not isinstance(user_id, bool) and user_id > 0


def _reject(err, reason):
    logger.warning("Auth: rejected token for %s from %s: %s", request.path, request.remote_addr, reason)
    return jsonify(err.to_dict()), err.status_code


def _unauthorized(reason):
    if not request.headers.get("Authorization"):
        err = UnauthorizedError("Authorization header required")
    else:
        err = UnauthorizedError("Invalid authorization header format")
    return _reject(err, reason)
