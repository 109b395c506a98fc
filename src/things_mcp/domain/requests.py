"""Typed request structs, one per Things operation.

Each request names its Things URL command and flattens itself into the
parameter mapping the URL builder expects. ``None`` means "not supplied" and
is dropped; any other value, including ``""``, is sent as-is so updates can
clear a field.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, List, Optional, Tuple, Union

from ..errors import ValidationError
from .enums import ListId, enum_values

Scalar = Union[str, int, float, bool]
Params = Dict[str, Scalar]


def _require(value: Optional[str], field: str) -> None:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required and must be a non-empty string", field=field)


def _compact(pairs: List[Tuple[str, Optional[Scalar]]]) -> Params:
    return {key: value for key, value in pairs if value is not None}


@dataclass(slots=True)
class NavigateRequest:
    command: ClassVar[str] = "show"

    list_id: str

    def __post_init__(self) -> None:
        _require(self.list_id, "list_id")
        allowed = enum_values(ListId)
        if self.list_id not in allowed:
            raise ValidationError(
                f"Invalid list ID '{self.list_id}'. Must be one of: {', '.join(allowed)}",
                field="list_id",
            )

    def to_params(self) -> Params:
        return {"id": self.list_id}


@dataclass(slots=True)
class CreateTodoRequest:
    command: ClassVar[str] = "add"

    title: str
    notes: Optional[str] = None
    when: Optional[str] = None
    deadline: Optional[str] = None
    tags: Optional[str] = None
    checklist: Optional[str] = None
    list: Optional[str] = None

    def __post_init__(self) -> None:
        _require(self.title, "title")

    def to_params(self) -> Params:
        return _compact(
            [
                ("title", self.title),
                ("notes", self.notes),
                ("when", self.when),
                ("deadline", self.deadline),
                ("tags", self.tags),
                ("checklist-items", self.checklist),
                ("list", self.list),
            ]
        )


@dataclass(slots=True)
class CreateProjectRequest:
    command: ClassVar[str] = "add-project"

    title: str
    notes: Optional[str] = None
    when: Optional[str] = None
    deadline: Optional[str] = None
    tags: Optional[str] = None
    area: Optional[str] = None
    todos: Optional[List[str]] = None

    def __post_init__(self) -> None:
        _require(self.title, "title")

    def to_params(self) -> Params:
        todos = "\n".join(self.todos) if self.todos else None
        return _compact(
            [
                ("title", self.title),
                ("notes", self.notes),
                ("when", self.when),
                ("deadline", self.deadline),
                ("tags", self.tags),
                ("area", self.area),
                ("to-dos", todos),
            ]
        )


@dataclass(slots=True)
class UpdateTodoRequest:
    command: ClassVar[str] = "update"

    id: str
    title: Optional[str] = None
    notes: Optional[str] = None
    when: Optional[str] = None
    deadline: Optional[str] = None
    tags: Optional[str] = None
    checklist: Optional[str] = None
    list: Optional[str] = None

    def __post_init__(self) -> None:
        _require(self.id, "id")

    def to_params(self) -> Params:
        return _compact(
            [
                ("id", self.id),
                ("title", self.title),
                ("notes", self.notes),
                ("when", self.when),
                ("deadline", self.deadline),
                ("tags", self.tags),
                ("checklist-items", self.checklist),
                ("list", self.list),
            ]
        )


@dataclass(slots=True)
class UpdateProjectRequest:
    command: ClassVar[str] = "update-project"

    id: str
    title: Optional[str] = None
    notes: Optional[str] = None
    when: Optional[str] = None
    deadline: Optional[str] = None
    tags: Optional[str] = None
    area: Optional[str] = None

    def __post_init__(self) -> None:
        _require(self.id, "id")

    def to_params(self) -> Params:
        return _compact(
            [
                ("id", self.id),
                ("title", self.title),
                ("notes", self.notes),
                ("when", self.when),
                ("deadline", self.deadline),
                ("tags", self.tags),
                ("area", self.area),
            ]
        )


@dataclass(slots=True)
class CompleteTodoRequest:
    command: ClassVar[str] = "update"

    id: str

    def __post_init__(self) -> None:
        _require(self.id, "id")

    def to_params(self) -> Params:
        return {"id": self.id, "completed": True}


@dataclass(slots=True)
class SearchRequest:
    command: ClassVar[str] = "search"

    query: str
    status: Optional[str] = None
    type: Optional[str] = None
    area: Optional[str] = None
    project: Optional[str] = None
    tag: Optional[str] = None
    list: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    limit: Optional[int] = None

    def __post_init__(self) -> None:
        _require(self.query, "query")

    @property
    def applied_filters(self) -> List[str]:
        names = ("status", "type", "area", "project", "tag", "list", "start_date", "end_date")
        return [name for name in names if getattr(self, name) is not None]

    def to_params(self) -> Params:
        return _compact(
            [
                ("query", self.query),
                ("status", self.status),
                ("type", self.type),
                ("area", self.area),
                ("project", self.project),
                ("tag", self.tag),
                ("list", self.list),
                ("start_date", self.start_date),
                ("end_date", self.end_date),
                ("limit", self.limit),
            ]
        )


ThingsRequest = Union[
    NavigateRequest,
    CreateTodoRequest,
    CreateProjectRequest,
    UpdateTodoRequest,
    UpdateProjectRequest,
    CompleteTodoRequest,
    SearchRequest,
]
