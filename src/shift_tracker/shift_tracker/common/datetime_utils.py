from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any

from ..core.exceptions import InvalidTimestamp, MissingField, ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    if not value:
        raise MissingField("date required (YYYY-MM-DD)")
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD")


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 instant into a naive local datetime.

    Aware values are converted to local time so they compare with the
    naive DATETIME values coming back from MySQL.
    """

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise InvalidTimestamp(f"Invalid timestamp {value!r}")
    else:
        raise InvalidTimestamp(f"Invalid timestamp {value!r}")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Local [start, end) boundaries of a calendar day."""
    start = datetime.combine(day, datetime.min.time())
    return start, start + timedelta(days=1)


def trailing_days(reference: date, count: int) -> list[date]:
    """`count` consecutive days ending at `reference`, oldest first."""
    return [reference - timedelta(days=offset) for offset in range(count - 1, -1, -1)]


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
