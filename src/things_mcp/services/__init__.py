"""Application services turning Things requests into dispatched URLs."""

from __future__ import annotations

from .batch import BatchExecutor
from .context import ServiceContext
from .dispatcher import CommandDispatcher, Opener
from .things import ThingsService

__all__ = ["BatchExecutor", "CommandDispatcher", "Opener", "ServiceContext", "ThingsService"]
