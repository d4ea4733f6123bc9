import logging

from flask import Flask, jsonify, request
from flask_cors import CORS

from config import Config
from database import init_db
from routes.asset_routes import asset_bp
from routes.auth_routes import auth_bp
from routes.transaction_routes import transaction_bp
from routes.user_routes import user_bp
from services.asset_service import AssetService
from services.auth_service import AuthService
from services.transaction_engine import TransactionEngine
from services.user_service import UserService
from utils.errors import register_error_handlers
from utils.logger import configure_logging
from utils.passwords import PasswordHasher
from utils.tokens import TokenService

logger = logging.getLogger(__name__)


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    configure_logging(app.config["LOG_LEVEL"])

    # --- Extensions ---
    init_db(app)
    password_hasher = PasswordHasher()
    password_hasher.init_app(app)
    token_service = TokenService(
        secret=app.config["JWT_SECRET_KEY"],
        ttl=app.config["TOKEN_TTL"],
    )
    token_service.init_app(app)

    # --- Services ---
    app.extensions["auth_service"] = AuthService(password_hasher, token_service)
    app.extensions["user_service"] = UserService()
    app.extensions["asset_service"] = AssetService()
    app.extensions["transaction_engine"] = TransactionEngine()

    # --- CORS ---
    CORS(app, resources={r"*": {"origins": app.config.get("CORS_ORIGINS", "*")}})

    # --- Blueprints ---
    prefix = app.config["API_PREFIX"]
    app.register_blueprint(auth_bp, url_prefix=f"{prefix}/auth")
    app.register_blueprint(user_bp, url_prefix=prefix)
    app.register_blueprint(asset_bp, url_prefix=prefix)
    app.register_blueprint(transaction_bp, url_prefix=prefix)

    register_error_handlers(app)

    @app.after_request
    def log_request(response):
        logger.info("%s %s %s %s", request.method, request.path, response.status_code, request.remote_addr)
        return response

    # --- Health check route ---
    @app.get("/health")
    def health():
        return jsonify({"status": "ok"})

    logger.info("App ready (%s), API under %s", app.config["ENVIRONMENT"], prefix)
    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=app.config["ENVIRONMENT"] == "development")
