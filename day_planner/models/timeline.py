"""
Request/response models for the timeline preview API.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from day_planner.models.plan_item import PlacedPlanItem, TimelineEdit
from day_planner.models.timeline_diff import TimelineDiff
from day_planner.utils.time_utils import parse_time_to_minutes


class TimelinePreviewRequest(BaseModel):
    """A drag tick: baseline, proposed start for the dragged item and edit.

    The proposed start is given either as ``cursor_time_minutes`` or as an
    ``HH:MM`` ``cursor_time``; the clock form is resolved into minutes.
    """

    baseline: list[PlacedPlanItem] = Field(default_factory=list)
    cursor_time_minutes: Optional[int] = None
    cursor_time: Optional[str] = Field(None, description="Proposed start as HH:MM")
    edit: TimelineEdit

    @model_validator(mode="after")
    def resolve_cursor_time(self):
        """Require exactly one cursor form and resolve it to minutes."""
        if (self.cursor_time is None) == (self.cursor_time_minutes is None):
            raise ValueError("Provide exactly one of cursor_time_minutes or cursor_time")
        if self.cursor_time is not None:
            minutes = parse_time_to_minutes(self.cursor_time)
            if minutes is None:
                raise ValueError(f"cursor_time must be HH:MM, got {self.cursor_time!r}")
            self.cursor_time_minutes = minutes
        return self


class TimelinePreviewResponse(BaseModel):
    """Edited timeline plus the per-item changes against the baseline."""

    items: list[PlacedPlanItem]
    diff: TimelineDiff
