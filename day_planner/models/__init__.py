"""Pydantic models (schemas) for the timeline."""

from day_planner.models.enums import EditMode, ShiftStatus
from day_planner.models.plan_item import ItemId, PlacedPlanItem, TimelineEdit
from day_planner.models.timeline import TimelinePreviewRequest, TimelinePreviewResponse
from day_planner.models.timeline_diff import ItemShift, TimelineDiff

__all__ = [
    # Enums
    "EditMode",
    "ShiftStatus",
    # Timeline
    "ItemId",
    "PlacedPlanItem",
    "TimelineEdit",
    "ItemShift",
    "TimelineDiff",
    "TimelinePreviewRequest",
    "TimelinePreviewResponse",
]
