from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.filters import WhereBuilder
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceFilter, AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "id, employeeName, employeeID, date, status, createdAt"
_ORDER_BY = "ORDER BY date DESC, createdAt DESC"


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(r["id"]),
        employee_name=r["employeeName"],
        employee_id=r["employeeID"],
        work_date=r["date"],
        status=AttendanceStatus(r["status"]),
        created_at=r.get("createdAt"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM Attendance {_ORDER_BY}")
            return [_to_record(r) for r in fetchall(cur)]

    def search(self, criteria: AttendanceFilter) -> Sequence[AttendanceRecord]:
        where, params = (
            WhereBuilder()
            .equals("date", criteria.work_date)
            .contains("employeeName", criteria.employee_name)
            .contains("employeeID", criteria.employee_id)
            .build()
        )

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM Attendance {where} {_ORDER_BY}", params)
            return [_to_record(r) for r in fetchall(cur)]

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM Attendance
                WHERE employeeID=%s AND date=%s
                """,
                (employee_id, work_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            return _to_record(r)

    def create(
        self,
        *,
        employee_name: str,
        employee_id: str,
        work_date: date,
        status: AttendanceStatus,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO Attendance(employeeName, employeeID, date, status)
                VALUES(%s,%s,%s,%s)
                """,
                (employee_name, employee_id, work_date, status.value),
            )
            return int(cur.lastrowid)

    def delete(self, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM Attendance WHERE id=%s", (int(record_id),))
            return cur.rowcount > 0
