"""
Timeline transform service.

Applies a drag edit to one day's timeline. Given the baseline items, the
proposed start time for the dragged item and the edit descriptor, it returns
a new ordered list of items. The baseline is never mutated: moved items are
fresh copies, untouched items are reused as-is.

Two strategies are supported:

- SIMPLE_REPOSITION: only the dragged item moves; overlap is allowed.
- REPOSITION_WITH_CASCADE: the dragged item moves and its neighbours are
  pushed outward just far enough to remove overlap, keeping their order.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from day_planner.core.exceptions import (
    DuplicateTargetError,
    InvalidCursorError,
    TargetNotFoundError,
    UnorderedBaselineError,
    UnsupportedModeError,
)
from day_planner.core.logger import setup_logger
from day_planner.models.enums import EditMode
from day_planner.models.plan_item import ItemId, PlacedPlanItem, TimelineEdit
from day_planner.utils.time_utils import format_minutes

logger = setup_logger(__name__)

Strategy = Callable[[Sequence[PlacedPlanItem], int, int], list[PlacedPlanItem]]


def ensure_time_ordered(items: Sequence[PlacedPlanItem]) -> None:
    """
    Check that items are sorted by start and pairwise non-overlapping.

    Raises:
        UnorderedBaselineError: On the first adjacent pair that overlaps or
            is out of order.
    """
    for index in range(len(items) - 1):
        previous, following = items[index], items[index + 1]
        if previous.end_minutes > following.start_minutes:
            raise UnorderedBaselineError(
                index, previous.end_minutes, following.start_minutes
            )


def push_later(items: Sequence[PlacedPlanItem], frontier: int) -> list[PlacedPlanItem]:
    """Shift items later so that none starts before the running frontier.

    ``items`` are walked in order. The frontier advances to the end of each
    item, whether it moved or not.
    """
    updated = []
    for item in items:
        if item.start_minutes < frontier:
            item = item.placed_at(frontier)
        updated.append(item)
        frontier = item.end_minutes
    return updated


def push_earlier(items: Sequence[PlacedPlanItem], frontier: int) -> list[PlacedPlanItem]:
    """Shift items earlier so that none ends after the running frontier.

    ``items`` are walked from the last one outward; the result keeps the
    original order.
    """
    updated = []
    for item in reversed(items):
        if item.end_minutes > frontier:
            item = item.placed_ending_at(frontier)
        updated.append(item)
        frontier = item.start_minutes
    updated.reverse()
    return updated


class TimelineTransformService:
    """Service applying drag edits to a timeline."""

    def __init__(self, validate_baseline: bool = True):
        """
        Initialize transform service.

        Args:
            validate_baseline: Check the cascade precondition (time-ordered,
                non-overlapping baseline) before cascading.
        """
        self.validate_baseline = validate_baseline
        self._strategies: dict[EditMode, Strategy] = {
            EditMode.SIMPLE_REPOSITION: self._reposition,
            EditMode.REPOSITION_WITH_CASCADE: self._reposition_with_cascade,
        }

    def transform(
        self,
        baseline: Sequence[PlacedPlanItem],
        cursor_time_minutes: int,
        edit: TimelineEdit,
    ) -> list[PlacedPlanItem]:
        """
        Apply an edit to the baseline.

        Args:
            baseline: Items ordered by start time
            cursor_time_minutes: Proposed new start of the dragged item, unclamped
            edit: Target item id and edit mode

        Returns:
            New list with the same length and ids as ``baseline``

        Raises:
            TargetNotFoundError: No item has ``edit.target_id``
            DuplicateTargetError: Several items have ``edit.target_id``
            InvalidCursorError: ``cursor_time_minutes`` is not an int
            UnsupportedModeError: ``edit.mode`` is not a supported mode
            UnorderedBaselineError: Cascade requested on an unordered or
                overlapping baseline
        """
        if isinstance(cursor_time_minutes, bool) or not isinstance(cursor_time_minutes, int):
            logger.warning("Rejected edit with cursor time %r", cursor_time_minutes)
            raise InvalidCursorError(cursor_time_minutes)

        index = self._find_target_index(baseline, edit.target_id)
        strategy = self._resolve_strategy(edit.mode)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Transform %s target=%r from %s to %s (%d items)",
                edit.mode,
                edit.target_id,
                format_minutes(baseline[index].start_minutes),
                format_minutes(cursor_time_minutes),
                len(baseline),
            )
        return strategy(baseline, index, cursor_time_minutes)

    def _find_target_index(self, baseline: Sequence[PlacedPlanItem], target_id: ItemId) -> int:
        indices = [i for i, item in enumerate(baseline) if item.id == target_id]
        if not indices:
            logger.warning(f"Edit target {target_id!r} not in baseline")
            raise TargetNotFoundError(target_id)
        if len(indices) > 1:
            logger.warning(f"Edit target {target_id!r} matches items at {indices}")
            raise DuplicateTargetError(target_id, indices)
        return indices[0]

    def _resolve_strategy(self, mode: Any) -> Strategy:
        try:
            strategy = self._strategies.get(EditMode(mode))
        except ValueError:
            strategy = None
        if strategy is None:
            logger.warning(f"Rejected edit with unknown mode {mode!r}")
            raise UnsupportedModeError(mode)
        return strategy

    def _reposition(
        self,
        baseline: Sequence[PlacedPlanItem],
        index: int,
        cursor_time_minutes: int,
    ) -> list[PlacedPlanItem]:
        moved = baseline[index].placed_at(cursor_time_minutes)
        return [*baseline[:index], moved, *baseline[index + 1:]]

    def _reposition_with_cascade(
        self,
        baseline: Sequence[PlacedPlanItem],
        index: int,
        cursor_time_minutes: int,
    ) -> list[PlacedPlanItem]:
        # The positional split below only matches the temporal one when the
        # baseline is sorted and non-overlapping.
        if self.validate_baseline:
            ensure_time_ordered(baseline)

        moved = baseline[index].placed_at(cursor_time_minutes)
        preceding = push_earlier(baseline[:index], frontier=moved.start_minutes)
        following = push_later(baseline[index + 1:], frontier=moved.end_minutes)
        return [*preceding, moved, *following]


_default_service = TimelineTransformService()


def transform(
    baseline: Sequence[PlacedPlanItem],
    cursor_time_minutes: int,
    edit: TimelineEdit,
) -> list[PlacedPlanItem]:
    """Apply ``edit`` with a default :class:`TimelineTransformService`."""
    return _default_service.transform(baseline, cursor_time_minutes, edit)
