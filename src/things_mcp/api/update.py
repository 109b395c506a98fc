from __future__ import annotations

from typing import Any, Dict, Optional

from ..domain import CompleteTodoRequest, UpdateProjectRequest, UpdateTodoRequest
from .registry import register_api
from .state import api_state
from .validation import (
    MAX_NOTES_LENGTH,
    MAX_TITLE_LENGTH,
    clean_checklist,
    clean_item_id,
    clean_optional_text,
    clean_when,
    keep_text,
    tool_errors,
)


def clean_todo_changes(
    *,
    title: Optional[str] = None,
    notes: Optional[str] = None,
    when: Optional[str] = None,
    deadline: Optional[str] = None,
    tags: Optional[str] = None,
    checklist: Optional[str] = None,
    list: Optional[str] = None,
) -> Dict[str, Any]:
    # notes/deadline/tags/checklist keep "" so the caller can clear them.
    return {
        "title": clean_optional_text(title, "title", limit=MAX_TITLE_LENGTH),
        "notes": keep_text(notes, "notes", limit=MAX_NOTES_LENGTH),
        "when": clean_when(when),
        "deadline": keep_text(deadline, "deadline"),
        "tags": keep_text(tags, "tags"),
        "checklist": clean_checklist(checklist, keep_empty=True),
        "list": clean_optional_text(list, "list"),
    }


@register_api(
    "update_todo",
    description=(
        "Update an existing to-do in Things. Only supplied fields change; "
        "pass an empty string for notes, deadline, tags or checklist to clear them."
    ),
    category="update",
    tags=("update", "todo"),
)
def update_todo(
    id: str,
    title: Optional[str] = None,
    notes: Optional[str] = None,
    when: Optional[str] = None,
    deadline: Optional[str] = None,
    tags: Optional[str] = None,
    checklist: Optional[str] = None,
    list: Optional[str] = None,
) -> str:
    with tool_errors("update to-do"):
        context = api_state.checked("update")
        changes = clean_todo_changes(
            title=title,
            notes=notes,
            when=when,
            deadline=deadline,
            tags=tags,
            checklist=checklist,
            list=list,
        )
        request = UpdateTodoRequest(id=clean_item_id(id, label="Todo"), **changes)
        context.things.update_todo(request)
    return f'Successfully updated to-do with ID: "{request.id}"'


@register_api(
    "update_project",
    description=(
        "Update an existing project in Things. Only supplied fields change; "
        "pass an empty string for notes, deadline or tags to clear them."
    ),
    category="update",
    tags=("update", "project"),
)
def update_project(
    id: str,
    title: Optional[str] = None,
    notes: Optional[str] = None,
    when: Optional[str] = None,
    deadline: Optional[str] = None,
    tags: Optional[str] = None,
    area: Optional[str] = None,
) -> str:
    with tool_errors("update project"):
        context = api_state.checked("update")
        request = UpdateProjectRequest(
            id=clean_item_id(id, label="Project"),
            title=clean_optional_text(title, "title", limit=MAX_TITLE_LENGTH),
            notes=keep_text(notes, "notes", limit=MAX_NOTES_LENGTH),
            when=clean_when(when),
            deadline=keep_text(deadline, "deadline"),
            tags=keep_text(tags, "tags"),
            area=clean_optional_text(area, "area"),
        )
        context.things.update_project(request)
    return f'Successfully updated project with ID: "{request.id}"'


@register_api(
    "complete_todo",
    description="Mark a to-do as completed in Things.",
    category="update",
    tags=("update", "complete"),
)
def complete_todo(id: str) -> str:
    with tool_errors("complete to-do"):
        context = api_state.checked("completion")
        request = CompleteTodoRequest(id=clean_item_id(id, label="Todo"))
        context.things.complete_todo(request)
    return f'Successfully marked to-do as completed: "{request.id}"'
