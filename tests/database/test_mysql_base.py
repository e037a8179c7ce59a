from __future__ import annotations

import mysql.connector
import pytest

from attendance_tracker.core.exceptions import DuplicateEntryError, StorageError
from attendance_tracker.database.mysql_base import db_cursor, fetchall, fetchone


class FakeCursor:
    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.closed = False
        self.executed = []

    def execute(self, sql, params=None):
        self.executed.append((sql, params))
        if self.error is not None:
            raise self.error

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def fetchall(self):
        return self.rows

    def close(self):
        self.closed = True


class FakeConn:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeFactory:
    def __init__(self, conn=None, error=None):
        self.conn = conn
        self.error = error

    def connect(self):
        if self.error is not None:
            raise self.error
        return self.conn


def test_commits_and_releases_on_success():
    cur = FakeCursor(rows=[{"test": 1}])
    conn = FakeConn(cur)

    with db_cursor(FakeFactory(conn)) as (_, c):
        c.execute("SELECT 1 AS test")
        assert fetchone(c) == {"test": 1}

    assert conn.committed and conn.closed and cur.closed
    assert not conn.rolled_back


def test_driver_error_becomes_storage_error_and_rolls_back():
    cur = FakeCursor(error=mysql.connector.ProgrammingError(msg="Table 'Attendance' doesn't exist", errno=1146))
    conn = FakeConn(cur)

    with pytest.raises(StorageError) as exc_info:
        with db_cursor(FakeFactory(conn)) as (_, c):
            c.execute("SELECT * FROM Attendance")

    assert not isinstance(exc_info.value, DuplicateEntryError)
    assert conn.rolled_back and conn.closed and not conn.committed


def test_duplicate_key_becomes_duplicate_entry_error():
    cur = FakeCursor(error=mysql.connector.IntegrityError(msg="Duplicate entry 'E100-2024-01-05'", errno=1062))
    conn = FakeConn(cur)

    with pytest.raises(DuplicateEntryError):
        with db_cursor(FakeFactory(conn)) as (_, c):
            c.execute("INSERT INTO Attendance ...")


def test_connect_failure_becomes_storage_error():
    factory = FakeFactory(error=mysql.connector.InterfaceError(msg="Can't connect", errno=2003))

    with pytest.raises(StorageError):
        with db_cursor(factory):
            pass


def test_non_driver_errors_pass_through_after_rollback():
    conn = FakeConn(FakeCursor())

    with pytest.raises(KeyError):
        with db_cursor(FakeFactory(conn)):
            raise KeyError("id")

    assert conn.rolled_back and conn.closed


def test_fetch_helpers_normalize_empty_results():
    cur = FakeCursor(rows=[])

    assert fetchone(cur) is None
    assert fetchall(cur) == []
