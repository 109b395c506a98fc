from __future__ import annotations

from enum import Enum


class ListId(str, Enum):
    TODAY = "today"
    INBOX = "inbox"
    UPCOMING = "upcoming"
    ANYTIME = "anytime"
    SOMEDAY = "someday"
    PROJECTS = "projects"
    AREAS = "areas"
    LOGBOOK = "logbook"


class When(str, Enum):
    TODAY = "today"
    TOMORROW = "tomorrow"
    EVENING = "evening"
    ANYTIME = "anytime"
    SOMEDAY = "someday"


class SearchStatus(str, Enum):
    OPEN = "open"
    COMPLETED = "completed"
    CANCELED = "canceled"
    ALL = "all"


class SearchType(str, Enum):
    TODOS = "todos"
    PROJECTS = "projects"
    ALL = "all"


class SearchList(str, Enum):
    INBOX = "inbox"
    TODAY = "today"
    UPCOMING = "upcoming"
    ANYTIME = "anytime"
    SOMEDAY = "someday"


class BatchKind(str, Enum):
    ADD = "add"
    UPDATE = "update"
    COMPLETE = "complete"


def enum_values(enum_cls: type[Enum]) -> list[str]:
    return [member.value for member in enum_cls]
