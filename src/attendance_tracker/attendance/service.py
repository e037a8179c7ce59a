from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import clean_text, require_choice, require_non_empty
from ..core.constants import (
    MSG_DUPLICATE,
    MSG_FIELDS_REQUIRED,
    MSG_INVALID_STATUS,
    MSG_NOT_FOUND,
)
from ..core.enums import AttendanceStatus
from ..core.exceptions import DuplicateEntryError, NotFoundError, ValidationError
from .model import AttendanceFilter, AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Attendance use cases: list, record, search and delete.

    Storage failures (``StorageError``) are not handled here; the controller
    turns them into generic server errors.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()

    def record(
        self,
        *,
        employee_name: Any,
        employee_id: Any,
        work_date: Any,
        status: Any,
    ) -> int:
        name = require_non_empty(employee_name, MSG_FIELDS_REQUIRED)
        emp_id = require_non_empty(employee_id, MSG_FIELDS_REQUIRED)
        date_s = require_non_empty(work_date, MSG_FIELDS_REQUIRED)
        status_s = require_non_empty(status, MSG_FIELDS_REQUIRED)

        status_s = require_choice(status_s, AttendanceStatus.values(), MSG_INVALID_STATUS)
        day = parse_iso_date(date_s)

        existing = self._attendance.get_for_employee_and_date(emp_id, day)
        if existing:
            raise ValidationError(MSG_DUPLICATE)

        try:
            record_id = self._attendance.create(
                employee_name=name,
                employee_id=emp_id,
                work_date=day,
                status=AttendanceStatus(status_s),
            )
        except DuplicateEntryError:
            # Lost the race against a concurrent insert; the unique key caught it.
            logger.info("Duplicate insert rejected for employee=%s date=%s", emp_id, day)
            raise ValidationError(MSG_DUPLICATE)

        logger.info("Recorded attendance id=%s employee=%s date=%s status=%s", record_id, emp_id, day, status_s)
        return record_id

    def delete(self, record_id: int) -> None:
        if not self._attendance.delete(int(record_id)):
            raise NotFoundError(MSG_NOT_FOUND)
        logger.info("Deleted attendance id=%s", record_id)

    def build_filter(self, params: Mapping[str, Any]) -> AttendanceFilter:
        """Build search criteria from query parameters; blank values are ignored."""
        date_s = clean_text(params.get("date"))
        work_date = None
        matches_nothing = False
        if date_s:
            try:
                work_date = parse_iso_date(date_s)
            except ValidationError:
                logger.debug("Filter date %r is not a calendar date; no record can match", date_s)
                matches_nothing = True

        return AttendanceFilter(
            work_date=work_date,
            employee_name=clean_text(params.get("employeeName")) or None,
            employee_id=clean_text(params.get("employeeID")) or None,
            matches_nothing=matches_nothing,
        )

    def search(self, criteria: AttendanceFilter) -> Sequence[AttendanceRecord]:
        if criteria.matches_nothing:
            return []
        if criteria.is_empty():
            return self._attendance.list_all()
        return self._attendance.search(criteria)
