from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class Shift:
    """Domain entity: a scheduled shift.

    ``duration_hours`` is derived from start/end once, when the shift is created,
    and stored as-is afterwards.
    """

    shift_id: int
    employee_id: Optional[int]
    employee_name: str
    role: str
    work_date: date
    start_time: str
    end_time: str
    duration_hours: float
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.shift_id,
            "employeeId": self.employee_id,
            "employee": self.employee_name,
            "role": self.role,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "startTime": self.start_time,
            "endTime": self.end_time,
            "durationHours": self.duration_hours,
        }
