from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance status on one date."""

    record_id: int
    employee_name: str
    employee_id: str
    work_date: date
    status: AttendanceStatus
    created_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON shape used by the HTTP API (column names as keys)."""
        return {
            "id": self.record_id,
            "employeeName": self.employee_name,
            "employeeID": self.employee_id,
            "date": self.work_date.isoformat(),
            "status": self.status.value,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class AttendanceFilter:
    """Optional search criteria; unset fields do not restrict the result.

    ``matches_nothing`` is set when a supplied date is not a calendar date:
    no row can equal it, so the search is empty.
    """

    work_date: Optional[date] = None
    employee_name: Optional[str] = None
    employee_id: Optional[str] = None
    matches_nothing: bool = False

    def is_empty(self) -> bool:
        return (
            self.work_date is None
            and not self.employee_name
            and not self.employee_id
            and not self.matches_nothing
        )
