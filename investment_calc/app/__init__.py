"""Application factory and app-wide configuration."""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from investment_calc.app.api.routes import CONVERTER_EXTENSION, api_bp
from investment_calc.config import Settings, settings as default_settings
from investment_calc.core.currency import (
    DEFAULT_CURRENCY_TABLE,
    CurrencyConverter,
    CurrencyTable,
)


def create_app(
    settings: Optional[Settings] = None,
    currency_table: Optional[CurrencyTable] = None,
) -> Flask:
    """Build the Flask app instance."""
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level.upper())

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.extensions[CONVERTER_EXTENSION] = CurrencyConverter(
        currency_table or DEFAULT_CURRENCY_TABLE
    )

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
