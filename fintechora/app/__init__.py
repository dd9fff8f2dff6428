"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from fintechora.app.api.routes import api_bp
from fintechora.config import AppConfig
from fintechora.core.logging import get_logger, setup_logging
from fintechora.storage.database import Store

logger = get_logger(__name__)


def create_app(config: Optional[AppConfig] = None) -> Flask:
    """Build the Flask app instance."""
    config = config or AppConfig.load()
    setup_logging(config.log_level)

    app = Flask(__name__)
    app.config.update(
        SECRET_KEY=config.secret_key,
        TESTING=config.testing,
        SESSION_COOKIE_HTTPONLY=True,
        SESSION_COOKIE_SAMESITE="Lax",
        FINTECHORA=config,
    )

    CORS(
        app,
        resources={r"/api/*": {"origins": list(config.cors_origins)}},
        supports_credentials=True,
    )

    store = Store(config.database_path)
    store.init_db()
    app.extensions["fintechora.store"] = store

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("Fintechora API ready (database=%s)", config.database_path)
    return app
