from __future__ import annotations

import importlib
import logging
import sys
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.constants import APP_NAME, DEFAULT_POOL_TIMEOUT, MSG_INTERNAL_ERROR
from .database.bootstrap import initialize_database
from .health.controller import register as register_health
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def load_settings(settings_module: Optional[str] = None) -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(settings_module or get_settings_module())


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        if e.code is None or e.code < 400:
            # Routing redirects (e.g. trailing slash) keep their own response.
            return e
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        logger.exception("Unhandled error")
        return jsonify({"error": MSG_INTERNAL_ERROR}), 500


def create_app(container: Optional[Container] = None, *, settings: Optional[ModuleType] = None) -> Flask:
    """Build the Flask app. Does not touch the database; bootstrap runs in ``main``."""
    settings = settings or load_settings()
    app = Flask(__name__)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    CORS(app, resources={r"/api/*": {"origins": getattr(settings, "CORS_ORIGINS", "*")}})

    if container is None:
        container = build_container(
            db_config=getattr(settings, "DB_CONFIG"),
            pool_size=int(getattr(settings, "DB_POOL_SIZE", 5)),
            pool_timeout=float(getattr(settings, "DB_POOL_TIMEOUT", DEFAULT_POOL_TIMEOUT)),
        )

    register_health(app, container)
    register_attendance(app, container)
    _register_error_handlers(app)

    return app


def _log_startup_failure(error: Optional[str]) -> None:
    logger.error("FAILED TO START APPLICATION: %s", error)
    logger.error("Troubleshooting tips:")
    logger.error("  1. Check if MySQL server is running")
    logger.error("  2. Verify database credentials in .env file")
    logger.error("  3. Ensure database user has proper permissions")


def main() -> int:
    settings = load_settings()
    configure_logging(settings)

    db_config = dict(getattr(settings, "DB_CONFIG"))
    logger.info("Starting %s (settings=%s)", APP_NAME, settings.__name__)
    logger.info(
        "Configuration: host=%s user=%s database=%s",
        db_config.get("host"),
        db_config.get("user"),
        db_config.get("database"),
    )

    result = initialize_database(db_config)
    if not result.ok:
        _log_startup_failure(result.error)
        return 1

    app = create_app(settings=settings)
    host = str(getattr(settings, "HOST", "0.0.0.0"))
    port = int(getattr(settings, "PORT", 5000))

    logger.info("%s started: http://localhost:%s", APP_NAME, port)
    logger.info("Database: %s @ %s", result.database, db_config.get("host"))
    for rule in sorted(app.url_map.iter_rules(), key=lambda r: r.rule):
        if rule.rule.startswith("/api/"):
            logger.info("  %s %s", ",".join(sorted(rule.methods - {"HEAD", "OPTIONS"})), rule.rule)

    app.run(host=host, port=port, debug=app.config["DEBUG"], use_reloader=False, threaded=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
