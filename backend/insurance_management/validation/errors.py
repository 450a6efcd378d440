"""Flatten pydantic error lists into the `{field: [messages]}` body of a 400."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from insurance_management.core.constants import Messages

# Sources FastAPI prefixes to every error location
_LOCATION_SOURCES = {"body", "query", "path", "header", "cookie"}


def _field_name(loc: tuple[Any, ...]) -> str:
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in _LOCATION_SOURCES:
        parts = parts[1:]
    return ".".join(parts) if parts else "body"


def _message(error: Mapping[str, Any]) -> str:
    error_type = error.get("type")
    if error_type == "missing":
        return Messages.REQUIRED
    if error_type == "string_too_short":
        # Blank input means the field was left empty
        value = error.get("input")
        if not isinstance(value, str) or not value.strip():
            return Messages.REQUIRED
        min_length = (error.get("ctx") or {}).get("min_length", 1)
        return Messages.TOO_SHORT.format(min_length=min_length)
    return error.get("msg", "")


def collect_field_errors(errors: Iterable[Mapping[str, Any]]) -> dict[str, list[str]]:
    """Group every error by field, keeping all messages in order."""
    collected: dict[str, list[str]] = {}
    for error in errors:
        field = _field_name(tuple(error.get("loc", ())))
        message = _message(error)
        messages = collected.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return collected
