from __future__ import annotations

from typing import Protocol


class StatusProbe(Protocol):
    database: str

    def ping(self) -> int:
        """Run a trivial query and return its scalar result."""

        raise NotImplementedError
