from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..config import AppSettings, get_settings
from .batch import BatchExecutor
from .dispatcher import CommandDispatcher, Opener
from .things import ThingsService


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root wiring settings into the dispatcher, service and batch executor."""

    settings: AppSettings = field(default_factory=get_settings)
    opener: Optional[Opener] = None
    dispatcher: CommandDispatcher = field(init=False)
    things: ThingsService = field(init=False)
    batch: BatchExecutor = field(init=False)

    def __post_init__(self) -> None:
        self.dispatcher = CommandDispatcher(self.settings.things, opener=self.opener)
        self.things = ThingsService(self.dispatcher)
        self.batch = BatchExecutor(self.settings.batch)
