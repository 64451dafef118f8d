"""
Minute-offset helpers for the day timeline.

Offsets are integer minutes from midnight of the planned day. They are not
restricted to a single day: edits may legitimately produce negative values
or values past 24:00.
"""

import re
from typing import Optional

MINUTES_PER_DAY = 24 * 60

_CLOCK_TIME = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")


def parse_time_to_minutes(value: str) -> Optional[int]:
    """
    Parse an ``HH:MM`` clock time into minutes since midnight.

    Returns:
        Minutes since midnight, or None if the value is not a 24h clock time.
    """
    match = _CLOCK_TIME.match((value or "").strip())
    if not match:
        return None
    return int(match.group(1)) * 60 + int(match.group(2))


def format_minutes(minutes: int) -> str:
    """
    Render a minute offset as ``HH:MM``.

    Negative offsets get a leading ``-`` and hours past midnight are kept,
    so ``-30`` is ``-00:30`` and ``1515`` is ``25:15``.
    """
    sign = "-" if minutes < 0 else ""
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{mins:02d}"


def clamp_start_minutes(
    start_minutes: int,
    duration_minutes: int,
    day_start: int = 0,
    day_end: int = MINUTES_PER_DAY,
) -> int:
    """
    Clamp a proposed start so the whole block fits inside ``[day_start, day_end]``.

    Blocks longer than the window are pinned to ``day_start``.
    """
    latest_start = day_end - duration_minutes
    if start_minutes > latest_start:
        start_minutes = latest_start
    if start_minutes < day_start:
        start_minutes = day_start
    return start_minutes
