from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceFilter, AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        """All records, newest date first, then newest insert first."""

        raise NotImplementedError

    def search(self, criteria: AttendanceFilter) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_name: str,
        employee_id: str,
        work_date: date,
        status: AttendanceStatus,
    ) -> int:
        """Insert a record and return its generated id.

        Raises ``DuplicateEntryError`` when (employee_id, work_date) exists.
        """

        raise NotImplementedError

    def delete(self, record_id: int) -> bool:
        raise NotImplementedError
