from __future__ import annotations

from datetime import date, datetime, timezone

from ..core.constants import MSG_INVALID_DATE
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError) as e:
        raise ValidationError(MSG_INVALID_DATE) from e


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
