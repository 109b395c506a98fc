from __future__ import annotations

from typing import Annotated, Any, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class ToolInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class BatchTodoItem(ToolInput):
    title: Optional[str] = Field(default=None, description="Title of the to-do (required)")
    notes: Optional[str] = Field(default=None, description="Notes for the to-do")
    when: Optional[str] = Field(default=None, description="today, tomorrow, evening, anytime or someday")
    deadline: Optional[str] = Field(default=None, description="Due date (YYYY-MM-DD)")
    tags: Optional[str] = Field(default=None, description="Comma-separated tags")
    list: Optional[str] = Field(default=None, description="Project or area to add the to-do to")


class TodoUpdateFields(ToolInput):
    title: Optional[str] = Field(default=None, description="New title")
    notes: Optional[str] = Field(default=None, description="New notes; an empty string clears them")
    when: Optional[str] = Field(default=None, description="today, tomorrow, evening, anytime or someday")
    deadline: Optional[str] = Field(default=None, description="New deadline; an empty string clears it")
    tags: Optional[str] = Field(default=None, description="Comma-separated tags; an empty string clears them")
    list: Optional[str] = Field(default=None, description="Move to this project or area")

    def provided(self) -> dict[str, str]:
        return self.model_dump(exclude_none=True)


class DateRange(ToolInput):
    start: Optional[str] = Field(default=None, description="Start date (YYYY-MM-DD)")
    end: Optional[str] = Field(default=None, description="End date (YYYY-MM-DD)")


class SearchFilter(ToolInput):
    status: Optional[str] = Field(default=None, description="open, completed, canceled or all")
    type: Optional[str] = Field(default=None, description="todos, projects or all")
    area: Optional[str] = None
    project: Optional[str] = None
    tag: Optional[str] = None
    list: Optional[str] = Field(default=None, description="inbox, today, upcoming, anytime or someday")
    date_range: Optional[DateRange] = None


class TemplateTodo(ToolInput):
    title: str


CustomTodo = Union[TemplateTodo, str]

# Batch items are validated one at a time by the handler; the schema still describes them.
BatchTodoList = Annotated[
    List[Any],
    Field(
        description="To-dos to create, processed in order",
        json_schema_extra={"items": BatchTodoItem.model_json_schema()},
    ),
]
TodoIdList = Annotated[
    List[Any],
    Field(
        description="Things to-do IDs, processed in order",
        json_schema_extra={"items": {"type": "string"}},
    ),
]


def coerce_model(model_cls: Type[ModelT], value: Any, *, field: str) -> ModelT:
    """Validate ``value`` into ``model_cls``, reporting failures as a ``ValidationError``."""

    if isinstance(value, model_cls):
        return value
    try:
        return model_cls.model_validate(value)
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid {field}: {describe_pydantic_error(exc)}", field=field) from exc


def describe_pydantic_error(exc: PydanticValidationError) -> str:
    parts: List[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "value"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)
