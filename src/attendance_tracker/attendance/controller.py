from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.constants import (
    MSG_DELETE_FAILED,
    MSG_DELETED,
    MSG_FETCH_FAILED,
    MSG_FILTER_FAILED,
    MSG_RECORD_FAILED,
    MSG_RECORDED,
)
from ..core.exceptions import NotFoundError, StorageError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _error(message: str, status: int):
        return jsonify({"error": message}), status

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    def attendance_list():
        try:
            records = service.list_all()
        except StorageError:
            logger.exception("Error fetching attendance")
            return _error(MSG_FETCH_FAILED, 500)
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_create")
    def attendance_create():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}

        try:
            record_id = service.record(
                employee_name=data.get("employeeName"),
                employee_id=data.get("employeeID"),
                work_date=data.get("date"),
                status=data.get("status"),
            )
        except ValidationError as e:
            return _error(str(e), 400)
        except StorageError:
            logger.exception("Error recording attendance")
            return _error(MSG_RECORD_FAILED, 500)

        return jsonify({"message": MSG_RECORDED, "id": record_id}), 201

    @app.route("/api/attendance/<int:record_id>", methods=["DELETE"], endpoint="attendance_delete")
    def attendance_delete(record_id: int):
        try:
            service.delete(record_id)
        except NotFoundError as e:
            return _error(str(e), 404)
        except StorageError:
            logger.exception("Error deleting record %s", record_id)
            return _error(MSG_DELETE_FAILED, 500)

        return jsonify({"message": MSG_DELETED})

    @app.route("/api/attendance/filter", methods=["GET"], endpoint="attendance_filter")
    def attendance_filter():
        try:
            criteria = service.build_filter(request.args)
            records = service.search(criteria)
        except StorageError:
            logger.exception("Error filtering attendance")
            return _error(MSG_FILTER_FAILED, 500)

        return jsonify([r.to_dict() for r in records])
