"""Shared checks used by the tool handlers.

Every helper either returns a cleaned value or raises ``ValidationError`` /
``ThingsEnvironmentError`` with a message that names the offending field.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Any, Iterator, List, Optional

from fastmcp.exceptions import ToolError

from ..config import ThingsSettings
from ..domain import ListId, When, enum_values
from ..errors import ThingsEnvironmentError, ThingsError, ValidationError
from ..services.dispatcher import PLATFORM_UNAVAILABLE

logger = logging.getLogger(__name__)

MAX_ID_LENGTH = 1000
MAX_QUERY_LENGTH = 500
MAX_TITLE_LENGTH = 4000
MAX_NOTES_LENGTH = 10000
MAX_CHECKLIST_ITEMS = 100
MIN_SEARCH_LIMIT = 1
MAX_SEARCH_LIMIT = 100


@contextmanager
def tool_errors(operation: str) -> Iterator[None]:
    """Re-raise domain failures as MCP tool errors that name the operation."""

    try:
        yield
    except ThingsError as exc:
        logger.warning("Failed to %s: %s", operation, exc)
        raise ToolError(f"Failed to {operation}: {exc}") from exc


def require_platform(settings: ThingsSettings) -> None:
    if not settings.is_platform_supported:
        raise ThingsEnvironmentError(PLATFORM_UNAVAILABLE)


def require_auth_token(settings: ThingsSettings, operation: str) -> None:
    if not settings.has_auth_token:
        raise ThingsEnvironmentError(
            f"THINGS_AUTHENTICATION_TOKEN is required for {operation} operations. "
            "Enable Things URLs in Things > Settings > General and set the token in the environment."
        )


def _expect_string(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string", field=field)
    return value


def _check_length(value: str, field: str, limit: int) -> str:
    if len(value) > limit:
        raise ValidationError(f"{field} is too long (max {limit} characters)", field=field)
    return value


def clean_title(value: Any, *, field: str = "title", label: str = "Title") -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} is required and cannot be empty", field=field)
    return _check_length(value.strip(), field, MAX_TITLE_LENGTH)


def clean_item_id(value: Any, *, label: str = "Item") -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} ID is required and cannot be empty", field="id")
    return _check_length(value.strip(), "id", MAX_ID_LENGTH)


def clean_list_id(value: Any) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError("List ID is required", field="list_id")
    cleaned = value.strip().lower()
    allowed = enum_values(ListId)
    if cleaned not in allowed:
        raise ValidationError(f"Invalid list ID. Must be one of: {', '.join(allowed)}", field="list_id")
    return cleaned


def clean_search_query(value: Any) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError("Search query is required and must be a non-empty string", field="query")
    return _check_length(value.strip(), "query", MAX_QUERY_LENGTH)


def clean_choice(value: Any, enum_cls: type[Enum], field: str) -> Optional[str]:
    """Blank means "not supplied"; anything else must be one of ``enum_cls``."""

    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    allowed = enum_values(enum_cls)
    cleaned = _expect_string(value, field).strip().lower()
    if cleaned not in allowed:
        raise ValidationError(f"'{field}' must be one of: {', '.join(allowed)}", field=field)
    return cleaned


def clean_when(value: Any) -> Optional[str]:
    return clean_choice(value, When, "when")


def clean_optional_text(value: Any, field: str, *, limit: Optional[int] = None) -> Optional[str]:
    """Trim optional text for creation; blank values are dropped."""

    if value is None:
        return None
    cleaned = _expect_string(value, field).strip()
    if not cleaned:
        return None
    return _check_length(cleaned, field, limit) if limit else cleaned


def keep_text(value: Any, field: str, *, limit: Optional[int] = None) -> Optional[str]:
    """Pass optional text through untouched so an explicit ``""`` clears the field."""

    if value is None:
        return None
    text = _expect_string(value, field)
    return _check_length(text, field, limit) if limit else text


def clean_checklist(value: Any, *, keep_empty: bool = False) -> Optional[str]:
    text = keep_text(value, "checklist") if keep_empty else clean_optional_text(value, "checklist")
    if text:
        items = [line for line in text.splitlines() if line.strip()]
        if len(items) > MAX_CHECKLIST_ITEMS:
            raise ValidationError(
                f"checklist supports at most {MAX_CHECKLIST_ITEMS} items",
                field="checklist",
            )
    return text


def clean_todo_titles(values: Any, *, field: str = "todos") -> Optional[List[str]]:
    if values is None:
        return None
    if not isinstance(values, (list, tuple)):
        raise ValidationError(f"{field} must be an array of strings", field=field)
    titles = [value.strip() for value in values if isinstance(value, str) and value.strip()]
    for title in titles:
        _check_length(title, field, MAX_TITLE_LENGTH)
    return titles


def clean_limit(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("limit must be an integer", field="limit")
    if not MIN_SEARCH_LIMIT <= value <= MAX_SEARCH_LIMIT:
        raise ValidationError(
            f"limit must be between {MIN_SEARCH_LIMIT} and {MAX_SEARCH_LIMIT}",
            field="limit",
        )
    return value
