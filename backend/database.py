# database.py
import logging

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

db = SQLAlchemy()

logger = logging.getLogger(__name__)


def init_db(app):
    uri = app.config.get("SQLALCHEMY_DATABASE_URI")
    logger.info("Connecting to database: %s", uri.split("@")[-1])

    db.init_app(app)

    # Create tables for every registered model
    with app.app_context():
        from models.user_model import User  # noqa: F401
        from models.asset_model import Asset  # noqa: F401
        from models.transaction_model import Transaction  # noqa: F401

        try:
            db.create_all()
        except SQLAlchemyError:
            logger.exception("Database initialization failed")
            raise
        logger.info("All tables and indexes are ready")
