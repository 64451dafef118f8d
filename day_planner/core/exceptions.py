"""
Custom exceptions for the day planner.
"""

from typing import Any, Optional


class PlannerError(Exception):
    """Base exception for day_planner."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundError(PlannerError):
    """Resource not found."""

    pass


class DuplicateError(PlannerError):
    """Duplicate resource detected."""

    pass


class ValidationError(PlannerError):
    """Validation error."""

    pass


class TargetNotFoundError(NotFoundError):
    """The edited item is not part of the baseline timeline."""

    def __init__(self, target_id: Any):
        super().__init__(
            f"Timeline item {target_id!r} not found in baseline",
            details={"target_id": target_id},
        )
        self.target_id = target_id


class DuplicateTargetError(DuplicateError):
    """More than one baseline item carries the edited item's id."""

    def __init__(self, target_id: Any, indices: list[int]):
        super().__init__(
            f"Timeline item {target_id!r} appears {len(indices)} times in baseline",
            details={"target_id": target_id, "indices": indices},
        )
        self.target_id = target_id
        self.indices = indices


class UnsupportedModeError(ValidationError):
    """Edit mode outside the supported set."""

    def __init__(self, mode: Any):
        super().__init__(f"Unknown edit mode: {mode}", details={"mode": mode})
        self.mode = mode


class UnorderedBaselineError(ValidationError):
    """Baseline is not time-ordered or has overlapping items."""

    def __init__(self, index: int, previous_end: int, next_start: int):
        super().__init__(
            f"Baseline items {index} and {index + 1} overlap or are out of order "
            f"(end {previous_end} > start {next_start})",
            details={
                "index": index,
                "previous_end": previous_end,
                "next_start": next_start,
            },
        )
        self.index = index


class InvalidCursorError(ValidationError):
    """Cursor time is not a whole number of minutes."""

    def __init__(self, cursor_time: Any):
        super().__init__(
            f"Cursor time must be an integer number of minutes, got {cursor_time!r}",
            details={"cursor_time": cursor_time},
        )
        self.cursor_time = cursor_time
