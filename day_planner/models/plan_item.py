"""
Timeline item models.
"""

from __future__ import annotations

from typing import Any, Union
from uuid import UUID

from pydantic import BaseModel, Field, computed_field

from day_planner.models.enums import EditMode

ItemId = Union[UUID, int, str]


class PlacedPlanItem(BaseModel):
    """A block placed on one day's timeline.

    Offsets are minutes from the start of the day and are not bounded to the
    day; an edit may push items before midnight or past the end of the day.
    """

    id: ItemId
    start_minutes: int
    duration_minutes: int = Field(..., ge=0)
    text: str = ""
    payload: dict[str, Any] = Field(default_factory=dict)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def end_minutes(self) -> int:
        return self.start_minutes + self.duration_minutes

    def placed_at(self, start_minutes: int) -> PlacedPlanItem:
        """Return a copy starting at ``start_minutes`` with the same duration.

        The copy owns its payload; edits to it never reach this item.
        """
        return self.model_copy(update={"start_minutes": start_minutes}, deep=True)

    def placed_ending_at(self, end_minutes: int) -> PlacedPlanItem:
        """Return a copy ending at ``end_minutes`` with the same duration."""
        return self.placed_at(end_minutes - self.duration_minutes)


class TimelineEdit(BaseModel):
    """Edit descriptor emitted by the drag gesture."""

    target_id: ItemId
    mode: EditMode
