from __future__ import annotations

from typing import Optional


class ThingsError(RuntimeError):
    """Base class for every failure raised while handling a Things tool call."""


class ValidationError(ThingsError):
    """Raised when caller-supplied input fails a local semantic check."""

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class ThingsEnvironmentError(ThingsError):
    """Raised when the host platform or credentials cannot serve a request."""


class BuildError(ThingsError):
    """Raised when a Things URL cannot be constructed. Indicates a programming error."""


class DispatchError(ThingsError):
    """Raised when the OS refuses to hand a Things URL to its registered handler."""


__all__ = [
    "BuildError",
    "DispatchError",
    "ThingsEnvironmentError",
    "ThingsError",
    "ValidationError",
]
