"""Application factory and app-wide configuration."""

import logging
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from simulator.app.api.routes import api_bp
from simulator.config import Config

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Install a basic handler unless the host (gunicorn, pytest) already did."""
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    logging.getLogger("simulator").setLevel(level)


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)
    app.json.sort_keys = False

    configure_logging(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info(
        "%s %s ready (amount unit %s, locale %s)",
        app.config["SERVICE_NAME"],
        app.config["VERSION"],
        app.config["AMOUNT_UNIT"],
        app.config["DEFAULT_LOCALE"],
    )
    return app
