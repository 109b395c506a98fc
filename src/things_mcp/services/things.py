from __future__ import annotations

from dataclasses import dataclass

from ..domain import (
    CompleteTodoRequest,
    CreateProjectRequest,
    CreateTodoRequest,
    LaunchAccepted,
    NavigateRequest,
    SearchRequest,
    ThingsRequest,
    UpdateProjectRequest,
    UpdateTodoRequest,
)
from .dispatcher import CommandDispatcher


@dataclass(slots=True)
class ThingsService:
    """One method per Things operation; each flattens its request and dispatches it."""

    dispatcher: CommandDispatcher

    def execute(self, request: ThingsRequest) -> LaunchAccepted:
        return self.dispatcher.dispatch(request.command, request.to_params())

    def show_list(self, request: NavigateRequest) -> LaunchAccepted:
        return self.execute(request)

    def add_todo(self, request: CreateTodoRequest) -> LaunchAccepted:
        return self.execute(request)

    def add_project(self, request: CreateProjectRequest) -> LaunchAccepted:
        return self.execute(request)

    def update_todo(self, request: UpdateTodoRequest) -> LaunchAccepted:
        return self.execute(request)

    def update_project(self, request: UpdateProjectRequest) -> LaunchAccepted:
        return self.execute(request)

    def complete_todo(self, request: CompleteTodoRequest) -> LaunchAccepted:
        return self.execute(request)

    def search(self, request: SearchRequest) -> LaunchAccepted:
        return self.execute(request)
