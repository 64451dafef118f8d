"""
Timeline diff service for comparing a baseline with an edited timeline.

Renderers use the diff to highlight moved blocks, and the persistence layer
uses it to write back only the items an edit actually touched.
"""

from __future__ import annotations

from typing import Sequence

from day_planner.core.exceptions import ValidationError
from day_planner.models.enums import ShiftStatus
from day_planner.models.plan_item import PlacedPlanItem
from day_planner.models.timeline_diff import ItemShift, TimelineDiff


class TimelineDiffService:
    """Service for calculating timeline differences."""

    def _get_shift_status(self, delta_minutes: int) -> ShiftStatus:
        if delta_minutes > 0:
            return ShiftStatus.MOVED_LATER
        if delta_minutes < 0:
            return ShiftStatus.MOVED_EARLIER
        return ShiftStatus.UNCHANGED

    def calculate_diff(
        self,
        baseline: Sequence[PlacedPlanItem],
        updated: Sequence[PlacedPlanItem],
    ) -> TimelineDiff:
        """
        Calculate the difference between a baseline and an edited timeline.

        Args:
            baseline: Timeline before the edit
            updated: Timeline returned by the transform service

        Returns:
            TimelineDiff listing moved items in ``updated`` order

        Raises:
            ValidationError: If the two timelines do not hold the same items
        """
        baseline_items = {item.id: item for item in baseline}
        updated_ids = [item.id for item in updated]

        if len(baseline) != len(updated) or set(baseline_items) != set(updated_ids):
            raise ValidationError(
                "Edited timeline does not contain the same items as the baseline",
                details={
                    "missing": [i for i in baseline_items if i not in set(updated_ids)],
                    "unexpected": [i for i in updated_ids if i not in baseline_items],
                },
            )

        summary = {f"{status.value}_count": 0 for status in ShiftStatus}
        changes = []

        for item in updated:
            before = baseline_items[item.id]
            delta = item.start_minutes - before.start_minutes
            status = self._get_shift_status(delta)
            summary[f"{status.value}_count"] += 1

            if status is ShiftStatus.UNCHANGED:
                continue
            changes.append(ItemShift(
                item_id=item.id,
                status=status,
                baseline_start=before.start_minutes,
                current_start=item.start_minutes,
                delta_minutes=delta,
            ))

        return TimelineDiff(changes=changes, summary=summary)
