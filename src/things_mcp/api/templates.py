from __future__ import annotations

from typing import Any, List, Optional

from ..domain.templates import CUSTOM_TEMPLATE, DEFAULT_CUSTOM_TODOS, PROJECT_TEMPLATES, template_names
from ..errors import ValidationError
from .add import build_project_request
from .models import CustomTodo, TemplateTodo, coerce_model
from .registry import register_api
from .state import api_state
from .validation import tool_errors


def template_todos(template_name: str, custom_todos: Optional[List[Any]] = None) -> List[str]:
    if template_name in PROJECT_TEMPLATES:
        return list(PROJECT_TEMPLATES[template_name])
    if template_name != CUSTOM_TEMPLATE:
        raise ValidationError(
            f"Unknown template: {template_name}. Must be one of: {', '.join(template_names())}",
            field="template_name",
        )
    if not custom_todos:
        return list(DEFAULT_CUSTOM_TODOS)
    titles = []
    for entry in custom_todos:
        if isinstance(entry, str):
            titles.append(entry)
        else:
            titles.append(coerce_model(TemplateTodo, entry, field="custom_todos").title)
    return titles


@register_api(
    "create_project_template",
    description=(
        "Create a Things project pre-filled with to-dos from a template: "
        "software_project, marketing_campaign, event_planning, research_project, "
        "or custom (uses custom_todos)."
    ),
    category="templates",
    tags=("create", "project", "template"),
)
def create_project_template(
    template_name: str,
    project_title: str,
    project_notes: Optional[str] = None,
    area: Optional[str] = None,
    tags: Optional[str] = None,
    when: Optional[str] = None,
    deadline: Optional[str] = None,
    custom_todos: Optional[List[CustomTodo]] = None,
) -> str:
    with tool_errors("create project template"):
        context = api_state.checked("project creation")
        name = (template_name or "").strip()
        request = build_project_request(
            title=project_title,
            notes=project_notes,
            when=when,
            deadline=deadline,
            tags=tags,
            area=area,
            todos=template_todos(name, custom_todos),
        )
        context.things.add_project(request)
    count = len(request.todos or [])
    return f'Successfully created project "{request.title}" from {name} template with {count} to-do items'
