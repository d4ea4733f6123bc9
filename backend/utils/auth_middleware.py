import logging
from functools import wraps

from flask import request
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request

from utils.errors import UnauthorizedError

logger = logging.getLogger(__name__)


def auth_required(fn):
    """Reject the request with 401 unless it carries a valid bearer token.

    Verification is done by flask-jwt-extended; its failures are answered by
    the loaders ``TokenService`` registers. On success the token's user id is
    available through ``current_user_id()``.
    """

    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()
        logger.debug("Auth: user %s accessing %s", get_jwt_identity(), request.path)
        return fn(*args, **kwargs)

    return wrapper


def current_user_id() -> int:
    """The authenticated user id. Never taken from the request body."""
    user_id = get_jwt_identity()
    if user_id is None:
        raise UnauthorizedError("User ID not found in token")
    return user_id
