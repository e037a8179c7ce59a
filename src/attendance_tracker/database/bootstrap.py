from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

import mysql.connector

from .connection import DBConfig

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"


@dataclass(frozen=True)
class BootstrapResult:
    """Outcome of the startup schema bootstrap, consumed by the entry point."""

    ok: bool
    database: str
    tables: list[str] = field(default_factory=list)
    error: Optional[str] = None


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _exec_sql(cur, sql: str) -> None:
    for stmt in _iter_sql_statements(sql):
        cur.execute(stmt)


def ensure_database_exists(target: DBConfig) -> None:
    conn = mysql.connector.connect(**target.connect_kwargs(with_database=False))
    try:
        logger.info("MySQL server connection successful (%s:%s)", target.host, target.port)
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
        logger.info("Database '%s' ready", target.database)
    finally:
        conn.close()


def apply_schema(target: DBConfig, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))

    conn = mysql.connector.connect(**target.connect_kwargs())
    try:
        cur = conn.cursor()
        _exec_sql(cur, sql)
        conn.commit()
        logger.info("Attendance table created/verified")
    finally:
        conn.close()


def list_tables(target: DBConfig) -> list[str]:
    conn = mysql.connector.connect(**target.connect_kwargs())
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()


def initialize_database(db_config: dict, *, schema_path: str | Path = SCHEMA_PATH) -> BootstrapResult:
    """Create the database and table if absent.

    Driver and file errors are reported through the result instead of raised,
    so the caller decides whether the process may start.
    """
    target = DBConfig.from_dict(db_config)
    logger.info("Attempting to connect to MySQL at %s:%s as %s", target.host, target.port, target.user)
    try:
        ensure_database_exists(target)
        apply_schema(target, schema_path=schema_path)
        tables = list_tables(target)
    except (mysql.connector.Error, OSError) as e:
        logger.error("Database initialization error: %s", e)
        return BootstrapResult(ok=False, database=target.database, error=str(e))

    logger.info("Database initialization completed (tables=%d)", len(tables))
    return BootstrapResult(ok=True, database=target.database, tables=tables)
