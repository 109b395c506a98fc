from __future__ import annotations

from typing import Callable

from ..domain import ListId, NavigateRequest
from .registry import register_api
from .state import api_state
from .validation import clean_list_id, tool_errors

LIST_DESCRIPTIONS = {
    ListId.TODAY: ("show_today_list", "Today", "all tasks scheduled for today"),
    ListId.INBOX: ("show_inbox", "Inbox", "all unorganized tasks in the inbox"),
    ListId.UPCOMING: ("show_upcoming", "Upcoming", "all tasks scheduled for future dates"),
    ListId.ANYTIME: ("show_anytime", "Anytime", "all tasks that can be done anytime"),
    ListId.SOMEDAY: ("show_someday", "Someday", "all tasks and projects parked for someday"),
    ListId.PROJECTS: ("show_projects", "Projects", "all active projects"),
    ListId.AREAS: ("show_areas", "Areas", "all areas of responsibility"),
    ListId.LOGBOOK: ("show_logbook", "Logbook", "all completed tasks and projects"),
}


def _open_list(list_id: str) -> str:
    context = api_state.checked("navigation", requires_auth=False)
    request = NavigateRequest(list_id=clean_list_id(list_id))
    context.things.show_list(request)
    label = LIST_DESCRIPTIONS[ListId(request.list_id)][1]
    return f"Successfully opened Things app and navigated to {label}"


@register_api(
    "show_list",
    description=(
        "Navigate the Things app to one of its built-in lists: "
        "today, inbox, upcoming, anytime, someday, projects, areas or logbook."
    ),
    category="navigation",
    tags=("show", "navigation"),
)
def show_list(list_id: str) -> str:
    with tool_errors("show list"):
        return _open_list(list_id)


def _make_show_tool(list_id: ListId) -> Callable[[], str]:
    name, label, contents = LIST_DESCRIPTIONS[list_id]

    def show() -> str:
        with tool_errors(f"show {label}"):
            return _open_list(list_id.value)

    show.__name__ = name
    show.__qualname__ = name
    show.__doc__ = f"Open Things on the {label} list."
    return register_api(
        name,
        description=f"Navigate to the Things app '{label}' view. Opens Things and displays {contents}.",
        category="navigation",
        tags=("show", "navigation", list_id.value),
    )(show)


SHOW_TOOLS = {list_id: _make_show_tool(list_id) for list_id in ListId}
