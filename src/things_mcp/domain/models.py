from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True, slots=True)
class LaunchAccepted:
    """The OS accepted a request to open ``url``.

    This says nothing about whether Things carried out the command; the URL
    scheme gives no confirmation back.
    """

    command: str
    url: str


@dataclass(frozen=True, slots=True)
class BatchOutcome:
    index: int
    label: str
    succeeded: bool
    detail: str

    def render(self) -> str:
        marker = "✅" if self.succeeded else "❌"
        return f'{marker} Item {self.index + 1}: "{self.label}" - {self.detail}'


@dataclass(slots=True)
class BatchReport:
    outcomes: List[BatchOutcome] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.succeeded)

    @property
    def failure_count(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.succeeded)

    @property
    def failed_indexes(self) -> List[int]:
        return [outcome.index for outcome in self.outcomes if not outcome.succeeded]

    def record(self, outcome: BatchOutcome) -> None:
        self.outcomes.append(outcome)

    def render(self, title: str, *, preamble: Optional[str] = None) -> str:
        sections = [f"{title}: {self.success_count} successful, {self.failure_count} failed"]
        if preamble:
            sections.append(preamble)
        details = "\n".join(outcome.render() for outcome in self.outcomes)
        sections.append(f"Detailed Results:\n{details}")
        return "\n\n".join(sections)
