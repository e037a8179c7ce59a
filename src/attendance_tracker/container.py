from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT
from .database.connection import DBConfig, DatabaseConnection
from .health.mysql_status_probe import MySQLStatusProbe
from .health.repository import StatusProbe
from .health.service import HealthService


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    status_probe: StatusProbe

    attendance_service: AttendanceService
    health_service: HealthService


def build_container(
    *,
    db_config: dict,
    pool_size: int = DEFAULT_POOL_SIZE,
    pool_timeout: float = DEFAULT_POOL_TIMEOUT,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config), pool_size=pool_size, pool_timeout=pool_timeout)

    return build_container_from(
        attendance_repo=MySQLAttendanceRepository(conn),
        status_probe=MySQLStatusProbe(conn),
    )


def build_container_from(*, attendance_repo: AttendanceRepository, status_probe: StatusProbe) -> Container:
    """Wire services around caller-supplied repositories (tests, scripts)."""
    return Container(
        attendance_repo=attendance_repo,
        status_probe=status_probe,
        attendance_service=AttendanceService(attendance_repo),
        health_service=HealthService(status_probe),
    )
