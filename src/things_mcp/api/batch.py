from __future__ import annotations

from typing import Any

from ..domain import BatchKind, CompleteTodoRequest, UpdateTodoRequest
from ..errors import ValidationError
from .add import build_todo_request
from .models import BatchTodoItem, BatchTodoList, TodoIdList, TodoUpdateFields, coerce_model
from .registry import register_api
from .state import api_state
from .update import clean_todo_changes
from .validation import clean_item_id, tool_errors


@register_api(
    "batch_add_todos",
    description=(
        "Create up to 20 to-dos in Things in one call. Items are processed in order; "
        "a failing item is reported and the rest still run."
    ),
    category="batch",
    tags=("batch", "create", "todo"),
)
def batch_add_todos(todos: BatchTodoList) -> str:
    with tool_errors("batch add todos"):
        context = api_state.checked("batch add")

        def add_one(item: Any) -> str:
            entry = coerce_model(BatchTodoItem, item, field="todo")
            context.things.add_todo(build_todo_request(**entry.model_dump()))
            return "Created successfully"

        report = context.batch.run(BatchKind.ADD, todos, add_one)
    return report.render("Batch add todos completed")


@register_api(
    "batch_complete_todos",
    description="Mark up to 50 to-dos as completed in Things, in order, reporting each item's outcome.",
    category="batch",
    tags=("batch", "complete"),
)
def batch_complete_todos(ids: TodoIdList) -> str:
    with tool_errors("batch complete todos"):
        context = api_state.checked("batch completion")

        def complete_one(item: Any) -> str:
            context.things.complete_todo(CompleteTodoRequest(id=clean_item_id(item, label="Todo")))
            return "Marked as completed"

        report = context.batch.run(BatchKind.COMPLETE, ids, complete_one)
    return report.render("Batch complete todos finished")


@register_api(
    "batch_update_todos",
    description=(
        "Apply the same changes to up to 20 to-dos in Things. "
        "At least one field of 'updates' must be supplied."
    ),
    category="batch",
    tags=("batch", "update", "todo"),
)
def batch_update_todos(ids: TodoIdList, updates: TodoUpdateFields) -> str:
    with tool_errors("batch update todos"):
        context = api_state.checked("batch update")
        provided = coerce_model(TodoUpdateFields, updates, field="updates").provided()
        changes = clean_todo_changes(**provided)
        applied = {key: value for key, value in changes.items() if value is not None}
        if not applied:
            raise ValidationError("At least one update field must be provided", field="updates")

        def update_one(item: Any) -> str:
            context.things.update_todo(UpdateTodoRequest(id=clean_item_id(item, label="Todo"), **changes))
            return "Updated successfully"

        report = context.batch.run(BatchKind.UPDATE, ids, update_one)

    summary = ", ".join(f"{key}: {value}" for key, value in applied.items())
    return report.render("Batch update todos completed", preamble=f"Applied Updates: {summary}")
