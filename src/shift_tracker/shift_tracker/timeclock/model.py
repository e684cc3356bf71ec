from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import PunchState


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass(frozen=True)
class BreakInterval:
    """A break inside a punch. ``end`` is None while the break is running."""

    start: datetime
    end: Optional[datetime] = None
    break_id: Optional[int] = None

    @property
    def is_open(self) -> bool:
        return self.end is None

    def to_dict(self) -> dict:
        return {"start": _iso(self.start), "end": _iso(self.end)}


@dataclass(frozen=True)
class Punch:
    """Domain entity: one clock-in/clock-out record with nested breaks."""

    punch_id: int
    employee_id: int
    employee_name: str
    clock_in: datetime
    clock_out: Optional[datetime] = None
    breaks: tuple[BreakInterval, ...] = ()

    @property
    def is_open(self) -> bool:
        return self.clock_out is None

    @property
    def open_break(self) -> Optional[BreakInterval]:
        for brk in reversed(self.breaks):
            if brk.is_open:
                return brk
        return None

    @property
    def state(self) -> PunchState:
        if not self.is_open:
            return PunchState.PUNCHED_OUT
        if self.open_break is not None:
            return PunchState.ON_BREAK
        return PunchState.PUNCHED_IN

    def to_dict(self) -> dict:
        return {
            "id": self.punch_id,
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "clockIn": _iso(self.clock_in),
            "clockOut": _iso(self.clock_out),
            "breaks": [b.to_dict() for b in self.breaks],
            "state": self.state.value,
        }
