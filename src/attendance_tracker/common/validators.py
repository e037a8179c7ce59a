from __future__ import annotations

from typing import Any, Iterable

from ..core.exceptions import ValidationError


def clean_text(value: Any) -> str:
    """Normalize a raw JSON/query value to a trimmed string ('' when missing)."""
    if value is None or isinstance(value, (dict, list, bool)):
        return ""
    return str(value).strip()


def require_non_empty(value: Any, message: str) -> str:
    cleaned = clean_text(value)
    if not cleaned:
        raise ValidationError(message)
    return cleaned


def require_choice(value: str, choices: Iterable[str], message: str) -> str:
    if value not in set(choices):
        raise ValidationError(message)
    return value
