import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()


class Config:
    # Any SQLAlchemy URL; Postgres in deployment, sqlite locally
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///asset_transactions.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # JWT / Auth
    JWT_SECRET_KEY = os.getenv("JWT_SECRET", "your-secret-key")
    TOKEN_TTL = timedelta(hours=24)

    # bcrypt cost factor (2^rounds)
    BCRYPT_LOG_ROUNDS = int(os.getenv("BCRYPT_LOG_ROUNDS", "12"))
    BCRYPT_HANDLE_LONG_PASSWORDS = True

    # CORS (adjust for your frontend origin)
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    API_PREFIX = "/api/v1"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    PORT = int(os.getenv("PORT", "8080"))
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    JWT_SECRET_KEY = "test-secret-key-for-the-pytest-suite"
    BCRYPT_LOG_ROUNDS = 4
    LOG_LEVEL = "WARNING"
    ENVIRONMENT = "test"
