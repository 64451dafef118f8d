"""
Models describing how an edit changed the timeline.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from day_planner.models.enums import ShiftStatus
from day_planner.models.plan_item import ItemId


class ItemShift(BaseModel):
    """Baseline vs. edited position of one item."""

    item_id: ItemId
    status: ShiftStatus
    baseline_start: int
    current_start: int
    delta_minutes: int = 0


class TimelineDiff(BaseModel):
    """Changes between a baseline and an edited timeline."""

    changes: list[ItemShift] = Field(default_factory=list)
    summary: dict[str, int] = Field(default_factory=dict)

    @property
    def changed_ids(self) -> list[ItemId]:
        return [change.item_id for change in self.changes]
