from __future__ import annotations

from ..common.datetime_utils import utc_timestamp
from ..core.constants import APP_VERSION
from .repository import StatusProbe


class HealthService:
    def __init__(self, probe: StatusProbe, *, version: str = APP_VERSION):
        self._probe = probe
        self._version = version

    @property
    def database(self) -> str:
        return self._probe.database

    def health(self) -> dict:
        """Liveness payload; never touches the database."""
        return {
            "status": "OK",
            "message": "Server is running",
            "timestamp": utc_timestamp(),
            "version": self._version,
        }

    def check_connection(self) -> int:
        """Raises ``StorageError`` when the database is unreachable."""
        return self._probe.ping()
