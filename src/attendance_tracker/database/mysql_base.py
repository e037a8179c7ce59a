from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import DuplicateEntryError, StorageError
from .connection import DatabaseConnection


def translate_error(error: mysql.connector.Error) -> StorageError:
    if getattr(error, "errno", None) == errorcode.ER_DUP_ENTRY:
        return DuplicateEntryError(str(error))
    return StorageError(str(error))


@contextmanager
def _borrow(conn_factory: DatabaseConnection, *, dictionary: bool):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        # Pooled connections return to the pool on close().
        conn.close()


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)``; commit on success, rollback on error.

    Driver errors surface as ``StorageError`` (``DuplicateEntryError`` for
    unique-key violations).
    """
    try:
        with _borrow(conn_factory, dictionary=dictionary) as pair:
            yield pair
    except mysql.connector.Error as e:
        raise translate_error(e) from e


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
