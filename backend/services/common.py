"""
Shared persistence helpers for the service layer.
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm.exc import StaleDataError

from database import db
from utils.errors import ConflictError, InternalError

logger = logging.getLogger(__name__)


def commit(action: str, conflict_message: str = "The resource conflicts with an existing one"):
    """Commit the session, translating database failures into API errors.

    ``action`` names the operation for logs and for the 500 message, e.g.
    ``"update transaction"``. A stale version (another writer got there
    first) or a uniqueness violation becomes ConflictError.
    """
    try:
        db.session.commit()
    except StaleDataError as e:
        db.session.rollback()
        logger.warning("Concurrent modification during %s", action)
        raise ConflictError("The resource was modified by another request; reload and retry") from e
    except IntegrityError as e:
        db.session.rollback()
        logger.warning("Constraint violation during %s", action)
        raise ConflictError(conflict_message) from e
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("Database error during %s", action)
        raise InternalError(f"Failed to {action}", error="Database error") from e
