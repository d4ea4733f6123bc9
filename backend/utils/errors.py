"""
Error taxonomy for the API and the Flask handlers that render it.

Every failure leaves the app as ``{"error": <kind>, "message": <text>}`` with
the status code of its class. Unexpected exceptions and database errors are
logged with their traceback and reported with a generic message only.
"""

import logging

from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500
    error = "Internal error"
    default_message = "An unexpected error occurred"

    def __init__(self, message=None, error=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        if error:
            self.error = error

    def to_dict(self):
        return {"error": self.error, "message": self.message}


class ValidationError(ApiError):
    status_code = 400
    error = "Invalid request"
    default_message = "The request body is invalid"


class NotFoundError(ApiError):
    status_code = 404
    error = "Not found"
    default_message = "The requested resource does not exist"


class AssetNotFound(NotFoundError):
    error = "Asset not found"
    default_message = "The specified asset does not exist"


class ConflictError(ApiError):
    status_code = 409
    error = "Conflict"
    default_message = "The resource conflicts with an existing one"


class UnauthorizedError(ApiError):
    status_code = 401
    error = "Unauthorized"
    default_message = "Authentication required"


class InvalidToken(UnauthorizedError):
    error = "Invalid token"
    default_message = "The token is invalid or expired"


class InvalidCredentials(UnauthorizedError):
    """Bad login. ``reason`` is for the audit log only and never rendered."""

    error = "Invalid credentials"
    default_message = "Email or password is incorrect"

    def __init__(self, reason, message=None):
        super().__init__(message)
        self.reason = reason


class InternalError(ApiError):
    pass


class HashingError(InternalError):
    error = "Password hashing error"
    default_message = "Failed to hash password"


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(err):
        if err.status_code >= 500:
            logger.error("%s: %s", err.error, err.message, exc_info=err)
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(SQLAlchemyError)
    def handle_db_error(err):
        logger.exception("Unhandled database error")
        return jsonify({"error": "Database error", "message": "A database error occurred"}), 500

    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        return jsonify({"error": err.name, "message": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_unexpected(err):
        logger.exception("Unhandled exception")
        return jsonify(InternalError().to_dict()), 500
