from __future__ import annotations

from typing import List, Optional

from ..domain import CreateProjectRequest, CreateTodoRequest
from .registry import register_api
from .state import api_state
from .validation import (
    MAX_NOTES_LENGTH,
    clean_checklist,
    clean_optional_text,
    clean_title,
    clean_todo_titles,
    clean_when,
    tool_errors,
)


def build_todo_request(
    *,
    title: Optional[str],
    notes: Optional[str] = None,
    when: Optional[str] = None,
    deadline: Optional[str] = None,
    tags: Optional[str] = None,
    checklist: Optional[str] = None,
    list: Optional[str] = None,
) -> CreateTodoRequest:
    return CreateTodoRequest(
        title=clean_title(title, label="Todo title"),
        notes=clean_optional_text(notes, "notes", limit=MAX_NOTES_LENGTH),
        when=clean_when(when),
        deadline=clean_optional_text(deadline, "deadline"),
        tags=clean_optional_text(tags, "tags"),
        checklist=clean_checklist(checklist),
        list=clean_optional_text(list, "list"),
    )


@register_api(
    "add_todo",
    description="Create a new to-do item in Things. Supports title, notes, scheduling, tags, checklist and target list.",
    category="add",
    tags=("create", "todo"),
)
def add_todo(
    title: str,
    notes: Optional[str] = None,
    when: Optional[str] = None,
    deadline: Optional[str] = None,
    tags: Optional[str] = None,
    checklist: Optional[str] = None,
    list: Optional[str] = None,
) -> str:
    """Create a to-do.

    Args:
        title: Title of the to-do (required).
        notes: Notes for the to-do.
        when: today, tomorrow, evening, anytime or someday.
        deadline: Due date, YYYY-MM-DD or natural language.
        tags: Comma-separated tags; they must already exist in Things.
        checklist: Checklist items, one per line.
        list: Title of the project or area to add the to-do to (defaults to the inbox).
    """
    with tool_errors("add to-do"):
        context = api_state.checked("add")
        request = build_todo_request(
            title=title,
            notes=notes,
            when=when,
            deadline=deadline,
            tags=tags,
            checklist=checklist,
            list=list,
        )
        context.things.add_todo(request)
    return f'Successfully created to-do: "{request.title}"'


def build_project_request(
    *,
    title: Optional[str],
    notes: Optional[str] = None,
    when: Optional[str] = None,
    deadline: Optional[str] = None,
    tags: Optional[str] = None,
    area: Optional[str] = None,
    todos: Optional[List[str]] = None,
) -> CreateProjectRequest:
    return CreateProjectRequest(
        title=clean_title(title, label="Project title"),
        notes=clean_optional_text(notes, "notes", limit=MAX_NOTES_LENGTH),
        when=clean_when(when),
        deadline=clean_optional_text(deadline, "deadline"),
        tags=clean_optional_text(tags, "tags"),
        area=clean_optional_text(area, "area"),
        todos=clean_todo_titles(todos),
    )


def describe_project(request: CreateProjectRequest) -> str:
    message = f'Successfully created project: "{request.title}"'
    if request.todos:
        message += f" with {len(request.todos)} initial to-do(s)"
    return message


@register_api(
    "add_project",
    description="Create a new project in Things, optionally with an area, tags and a list of initial to-dos.",
    category="add",
    tags=("create", "project"),
)
def add_project(
    title: str,
    notes: Optional[str] = None,
    when: Optional[str] = None,
    deadline: Optional[str] = None,
    tags: Optional[str] = None,
    area: Optional[str] = None,
    todos: Optional[List[str]] = None,
) -> str:
    with tool_errors("add project"):
        context = api_state.checked("add")
        request = build_project_request(
            title=title,
            notes=notes,
            when=when,
            deadline=deadline,
            tags=tags,
            area=area,
            todos=todos,
        )
        context.things.add_project(request)
    return describe_project(request)
