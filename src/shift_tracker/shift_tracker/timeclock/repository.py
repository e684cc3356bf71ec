from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Punch


class PunchRepository(Protocol):
    def get_by_id(self, punch_id: int) -> Optional[Punch]:
        raise NotImplementedError

    def list_punches(self, *, employee_id: Optional[int] = None) -> Sequence[Punch]:
        """All punches ordered by clock-in, optionally for one employee."""

        raise NotImplementedError

    def list_clocked_in_between(self, *, start: datetime, end: datetime) -> Sequence[Punch]:
        """Punches whose clock-in falls within [start, end)."""

        raise NotImplementedError

    def get_open_for_employee(self, employee_id: int) -> Optional[Punch]:
        """Latest punch without a clock-out."""

        raise NotImplementedError

    def create_punch(self, *, employee_id: int, employee_name: str, clock_in: datetime) -> int:
        raise NotImplementedError

    def set_clock_out(self, *, punch_id: int, clock_out: datetime) -> bool:
        """Close an open punch. Returns False if it was already closed."""

        raise NotImplementedError

    def add_break(self, *, punch_id: int, start: datetime) -> int:
        """Open a break. Returns 0 if the punch already has an open break."""

        raise NotImplementedError

    def close_break(self, *, break_id: int, end: datetime) -> bool:
        raise NotImplementedError
