from __future__ import annotations

from typing import Any, Optional, Tuple


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class WhereBuilder:
    """Compose parameterized ``WHERE`` predicates joined with AND.

    Predicates whose value is ``None`` or an empty string are skipped, so
    callers can pass optional filters straight through.

        where, params = (
            WhereBuilder()
            .equals("date", work_date)
            .contains("employeeName", name)
            .build()
        )
    """

    def __init__(self) -> None:
        self._clauses: list[str] = []
        self._params: list[Any] = []

    @staticmethod
    def _skip(value: Optional[Any]) -> bool:
        return value is None or value == ""

    def equals(self, column: str, value: Optional[Any]) -> "WhereBuilder":
        if not self._skip(value):
            self._clauses.append(f"{column} = %s")
            self._params.append(value)
        return self

    def contains(self, column: str, value: Optional[str]) -> "WhereBuilder":
        if not self._skip(value):
            self._clauses.append(f"{column} LIKE %s")
            self._params.append(f"%{escape_like(str(value))}%")
        return self

    def __len__(self) -> int:
        return len(self._clauses)

    def build(self) -> Tuple[str, Tuple[Any, ...]]:
        """Return ``(sql, params)``; sql is empty when no predicate applies."""
        if not self._clauses:
            return "", ()
        return "WHERE " + " AND ".join(self._clauses), tuple(self._params)
