from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import StatusProbe


class MySQLStatusProbe(StatusProbe):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @property
    def database(self) -> str:
        return self._conn_factory.database

    def ping(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS test")
            row = fetchone(cur)
            return int(row["test"]) if row else 0
