from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..services import ServiceContext
from .validation import require_auth_token, require_platform


@dataclass(slots=True)
class ApiState:
    """Holds the process-wide service context used by the tool handlers.

    The context is built on first use so importing the API never touches the
    platform check; the CLI installs one explicitly at startup.
    """

    _context: Optional[ServiceContext] = None

    @property
    def context(self) -> ServiceContext:
        if self._context is None:
            self._context = ServiceContext()
        return self._context

    def checked(self, operation: str, *, requires_auth: bool = True) -> ServiceContext:
        """Return the context once the platform (and, for writes, the token) is usable."""

        context = self.context
        require_platform(context.settings.things)
        if requires_auth:
            require_auth_token(context.settings.things, operation)
        return context

    def install(self, context: ServiceContext) -> None:
        self._context = context

    def reset(self) -> None:
        self._context = None


api_state = ApiState()
