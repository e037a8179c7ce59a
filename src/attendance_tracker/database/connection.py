from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from mysql.connector import pooling
from mysql.connector.errors import PoolError

from ..core.constants import DEFAULT_POOL_NAME, DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "attendance_tracker")),
        )

    def connect_kwargs(self, *, with_database: bool = True) -> dict:
        kwargs = {
            "host": self.host,
            "port": int(self.port),
            "user": self.user,
            "password": self.password,
        }
        if with_database:
            kwargs["database"] = self.database
        return kwargs


class _PooledConnection:
    """Pooled connection that frees its slot in the client when closed."""

    def __init__(self, conn, release):
        self._conn = conn
        self._release = release

    def __getattr__(self, name):
        return getattr(self._conn, name)

    def close(self) -> None:
        release, self._release = self._release, None
        if release is None:
            return
        try:
            self._conn.close()
        finally:
            release()


class DatabaseConnection:
    """Storage client owning a shared MySQL connection pool.

    The pool is created on first use so that constructing the client never
    touches the server; bootstrap must have created the database by then.
    ``connect()`` blocks until a pooled connection is free (up to
    ``pool_timeout`` seconds); the connection goes back on ``close()``.
    """

    def __init__(
        self,
        config: DBConfig,
        *,
        pool_size: int = DEFAULT_POOL_SIZE,
        pool_name: str = DEFAULT_POOL_NAME,
        pool_timeout: float = DEFAULT_POOL_TIMEOUT,
    ):
        self._config = config
        self._pool_size = int(pool_size)
        self._pool_name = pool_name
        self._pool_timeout = float(pool_timeout)
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._lock = threading.Lock()
        self._slots = threading.BoundedSemaphore(self._pool_size)

    @property
    def database(self) -> str:
        return self._config.database

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        with self._lock:
            if self._pool is None:
                logger.debug(
                    "Creating connection pool %s (size=%s) for %s@%s:%s/%s",
                    self._pool_name,
                    self._pool_size,
                    self._config.user,
                    self._config.host,
                    self._config.port,
                    self._config.database,
                )
                self._pool = pooling.MySQLConnectionPool(
                    pool_name=self._pool_name,
                    pool_size=self._pool_size,
                    **self._config.connect_kwargs(),
                )
            return self._pool

    def connect(self):
        if not self._slots.acquire(timeout=self._pool_timeout):
            raise PoolError(msg=f"No free connection in pool {self._pool_name} after {self._pool_timeout:g}s")
        try:
            conn = self._get_pool().get_connection()
        except Exception:
            self._slots.release()
            raise
        return _PooledConnection(conn, self._slots.release)
