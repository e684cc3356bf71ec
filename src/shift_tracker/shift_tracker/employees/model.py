from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: a roster entry. ``role`` is the job label (Server, Host, ...)."""

    employee_id: int
    name: str
    email: Optional[str] = None
    role: Optional[str] = None
    department: Optional[str] = None
    level: Optional[str] = None
    hourly_rate: Optional[float] = None
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    join_date: Optional[date] = None
    user_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "userId": self.user_id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "department": self.department,
            "level": self.level,
            "hourlyRate": self.hourly_rate,
            "status": self.status.value,
            "joinDate": self.join_date.isoformat() if self.join_date else None,
        }
