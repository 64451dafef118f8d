"""
Enum definitions for the timeline.
"""

from enum import Enum


class EditMode(str, Enum):
    """
    How a drag on the timeline is applied.

    SIMPLE_REPOSITION = Move only the dragged item, overlap allowed
    REPOSITION_WITH_CASCADE = Move the item and push neighbours out of the way
    """

    SIMPLE_REPOSITION = "SIMPLE_REPOSITION"
    REPOSITION_WITH_CASCADE = "REPOSITION_WITH_CASCADE"


class ShiftStatus(str, Enum):
    """Per-item outcome of an edit, relative to the baseline."""

    UNCHANGED = "unchanged"
    MOVED_LATER = "moved_later"
    MOVED_EARLIER = "moved_earlier"
