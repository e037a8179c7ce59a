from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.datetime_utils import utc_timestamp
from ..core.constants import MSG_DB_FAILED
from ..core.exceptions import StorageError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.health_service

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify(service.health())

    @app.route("/api/test", methods=["GET"], endpoint="db_test")
    def db_test():
        try:
            value = service.check_connection()
        except StorageError:
            logger.exception("Database connection test failed")
            return jsonify({"error": MSG_DB_FAILED}), 500

        return jsonify(
            {
                "message": "Database connection successful!",
                "test": value,
                "database": service.database,
                "status": "connected",
            }
        )

    @app.route("/api/db-status", methods=["GET"], endpoint="db_status")
    def db_status():
        try:
            service.check_connection()
        except StorageError:
            logger.exception("Database status check failed")
            return jsonify({"status": "disconnected", "message": MSG_DB_FAILED}), 500

        return jsonify(
            {
                "status": "connected",
                "message": "Database connection is healthy",
                "database": service.database,
                "timestamp": utc_timestamp(),
            }
        )
