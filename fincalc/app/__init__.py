"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from fincalc.app.api.routes import api_bp
from fincalc.core.emi import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE

DEFAULT_CONFIG = {
    "CORS_ORIGINS": [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ],
    "LOG_LEVEL": "INFO",
    "STEP_UP_EMI_TOLERANCE": DEFAULT_TOLERANCE,
    "STEP_UP_EMI_MAX_ITERATIONS": DEFAULT_MAX_ITERATIONS,
}


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """
    Build the Flask app instance.

    Configuration is layered: built-in defaults, then FINCALC_* environment
    variables (values parsed as JSON where possible), then `config`.
    """
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env("FINCALC")
    if config:
        app.config.update(config)

    log_level = app.config["LOG_LEVEL"]
    if isinstance(log_level, str):
        log_level = log_level.upper()
    logging.getLogger("fincalc").setLevel(log_level)

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
