from __future__ import annotations

import importlib
from datetime import date, datetime, timedelta
from typing import Optional

import pytest

from attendance_tracker.attendance.model import AttendanceFilter, AttendanceRecord
from attendance_tracker.container import build_container_from
from attendance_tracker.core.enums import AttendanceStatus
from attendance_tracker.core.exceptions import DuplicateEntryError, StorageError
from attendance_tracker.main import create_app


class InMemoryAttendance:
    """Behaves like the MySQL table: (employeeID, date) unique key, case-insensitive LIKE."""

    def __init__(self):
        self._rows: dict[int, AttendanceRecord] = {}
        self._id = 0
        self._clock = datetime(2024, 1, 1, 9, 0, 0)
        self.fail_with: Optional[Exception] = None
        self.skip_existence_check = False

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    @staticmethod
    def _ordered(rows):
        return sorted(rows, key=lambda r: (r.work_date, r.created_at), reverse=True)

    def list_all(self):
        self._check()
        return self._ordered(self._rows.values())

    def search(self, criteria: AttendanceFilter):
        self._check()
        rows = list(self._rows.values())
        if criteria.work_date is not None:
            rows = [r for r in rows if r.work_date == criteria.work_date]
        if criteria.employee_name:
            rows = [r for r in rows if criteria.employee_name.casefold() in r.employee_name.casefold()]
        if criteria.employee_id:
            rows = [r for r in rows if criteria.employee_id.casefold() in r.employee_id.casefold()]
        return self._ordered(rows)

    def get_for_employee_and_date(self, employee_id: str, work_date: date):
        self._check()
        if self.skip_existence_check:
            return None
        for r in self._rows.values():
            if r.employee_id == employee_id and r.work_date == work_date:
                return r
        return None

    def create(self, *, employee_name, employee_id, work_date, status):
        self._check()
        for r in self._rows.values():
            if r.employee_id == employee_id and r.work_date == work_date:
                raise DuplicateEntryError("Duplicate entry for key 'uq_attendance_employee_date'")
        self._id += 1
        self._clock += timedelta(seconds=1)
        self._rows[self._id] = AttendanceRecord(
            record_id=self._id,
            employee_name=employee_name,
            employee_id=employee_id,
            work_date=work_date,
            status=AttendanceStatus(status),
            created_at=self._clock,
        )
        return self._id

    def delete(self, record_id: int) -> bool:
        self._check()
        return self._rows.pop(int(record_id), None) is not None


class FakeProbe:
    def __init__(self, database: str = "attendance_tracker_test"):
        self.database = database
        self.fail = False
        self.calls = 0

    def ping(self) -> int:
        self.calls += 1
        if self.fail:
            raise StorageError("Can't connect to MySQL server on 'localhost:3306'")
        return 1


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def db_status():
    return FakeProbe()


@pytest.fixture
def container(attendance_repo, db_status):
    return build_container_from(attendance_repo=attendance_repo, status_probe=db_status)


@pytest.fixture
def app(container):
    settings = importlib.import_module("config.testing")
    return create_app(container, settings=settings)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def jane():
    return {"employeeName": "Jane Doe", "employeeID": "E100", "date": "2024-01-05", "status": "Present"}
