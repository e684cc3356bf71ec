from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for authorization."""

    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"

    @property
    def can_manage(self) -> bool:
        return self in (Role.ADMIN, Role.MANAGER)


class PunchState(str, Enum):
    """Where an employee is in the clock-in / break / clock-out cycle."""

    NOT_PUNCHED_IN = "NOT_PUNCHED_IN"
    PUNCHED_IN = "PUNCHED_IN"
    ON_BREAK = "ON_BREAK"
    PUNCHED_OUT = "PUNCHED_OUT"


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class PunchAction(str, Enum):
    CLOCK_IN = "clock-in"
    BREAK_START = "break-start"
    BREAK_END = "break-end"
    CLOCK_OUT = "clock-out"
