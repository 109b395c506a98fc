from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from ..config import BatchSettings
from ..domain import BatchKind, BatchOutcome, BatchReport
from ..errors import ThingsError, ValidationError

logger = logging.getLogger(__name__)

ItemOperation = Callable[[Any], str]
ItemLabel = Callable[[Any], str]


def _default_label(item: Any) -> str:
    if isinstance(item, str):
        return item.strip() or "Unknown"
    title = item.get("title") if isinstance(item, dict) else getattr(item, "title", None)
    if isinstance(title, str) and title.strip():
        return title.strip()
    return "Unknown"


class BatchExecutor:
    """Applies one operation to a list of items, one at a time, in order.

    A failing item is recorded and the run carries on with the next one.
    """

    def __init__(
        self,
        settings: BatchSettings,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._settings = settings
        self._sleep = sleep

    @property
    def limits(self) -> Dict[BatchKind, int]:
        return {
            BatchKind.ADD: self._settings.max_add_items,
            BatchKind.UPDATE: self._settings.max_update_items,
            BatchKind.COMPLETE: self._settings.max_complete_items,
        }

    def check_items(self, kind: BatchKind, items: Any) -> Sequence[Any]:
        operation = f"Batch {kind.value}"
        if not isinstance(items, (list, tuple)):
            raise ValidationError(f"{operation} requires an array of items", field="items")
        if not items:
            raise ValidationError(f"{operation} requires at least one item", field="items")
        limit = self.limits[kind]
        if len(items) > limit:
            raise ValidationError(
                f"{operation} supports a maximum of {limit} items at once. "
                "Please split your request into smaller batches.",
                field="items",
            )
        return items

    def run(
        self,
        kind: BatchKind,
        items: Sequence[Any],
        operation: ItemOperation,
        *,
        label: Optional[ItemLabel] = None,
    ) -> BatchReport:
        self.check_items(kind, items)
        label_for = label or _default_label
        report = BatchReport()
        last = len(items) - 1
        for index, item in enumerate(items):
            try:
                detail = operation(item)
            except (ThingsError, PydanticValidationError) as exc:
                logger.warning("Batch %s item %d failed: %s", kind.value, index + 1, exc)
                report.record(BatchOutcome(index=index, label=label_for(item), succeeded=False, detail=f"Error: {exc}"))
            else:
                report.record(BatchOutcome(index=index, label=label_for(item), succeeded=True, detail=detail))
            if index < last and self._settings.delay_seconds > 0:
                self._sleep(self._settings.delay_seconds)
        logger.info(
            "Batch %s finished: %d successful, %d failed",
            kind.value,
            report.success_count,
            report.failure_count,
        )
        return report
