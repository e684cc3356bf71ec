"""Time-of-day arithmetic for scheduled shifts.

Shift times are wall-clock ``HH:MM`` strings (24-hour). A shift whose end is
earlier than its start runs past midnight into the next day.
"""
from __future__ import annotations

import math

from ..core.constants import MINUTES_IN_DAY
from ..core.exceptions import InvalidTime


def round2(value: float) -> float:
    """Round to 2 decimals, halves rounding up (``Math.round`` semantics)."""
    return math.floor(value * 100 + 0.5) / 100


def to_minutes(value: str) -> int:
    """Convert ``HH:MM`` into minutes since midnight."""
    parts = str(value if value is not None else "").strip().split(":")
    if len(parts) != 2:
        raise InvalidTime(f"Invalid time {value!r}, expected HH:MM")

    hours_s, minutes_s = parts
    if not (hours_s.isdigit() and minutes_s.isdigit()):
        raise InvalidTime(f"Invalid time {value!r}, expected HH:MM")

    hours, minutes = int(hours_s), int(minutes_s)
    if hours > 23 or minutes > 59:
        raise InvalidTime(f"Invalid time {value!r}, out of range")
    return hours * 60 + minutes


def duration_hours(start: str, end: str) -> float:
    """Length of a shift in hours, rounded to 2 decimals.

    Equal start and end gives ``0.0`` (callers reject it), never 24 hours.
    """

    start_minutes = to_minutes(start)
    end_minutes = to_minutes(end)
    if end_minutes == start_minutes:
        return 0.0
    if end_minutes < start_minutes:
        end_minutes += MINUTES_IN_DAY
    return round2((end_minutes - start_minutes) / 60)


def format_hhmm(minutes: int) -> str:
    """Minutes since midnight back to zero-padded ``HH:MM``."""
    minutes = int(minutes) % MINUTES_IN_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
