"""Domain types for Things URL commands."""

from __future__ import annotations

from .enums import BatchKind, ListId, SearchList, SearchStatus, SearchType, When, enum_values
from .models import BatchOutcome, BatchReport, LaunchAccepted
from .requests import (
    CompleteTodoRequest,
    CreateProjectRequest,
    CreateTodoRequest,
    NavigateRequest,
    Params,
    Scalar,
    SearchRequest,
    ThingsRequest,
    UpdateProjectRequest,
    UpdateTodoRequest,
)

__all__ = [
    "BatchKind",
    "BatchOutcome",
    "BatchReport",
    "CompleteTodoRequest",
    "CreateProjectRequest",
    "CreateTodoRequest",
    "LaunchAccepted",
    "ListId",
    "NavigateRequest",
    "Params",
    "Scalar",
    "SearchList",
    "SearchRequest",
    "SearchStatus",
    "SearchType",
    "ThingsRequest",
    "UpdateProjectRequest",
    "UpdateTodoRequest",
    "When",
    "enum_values",
]
