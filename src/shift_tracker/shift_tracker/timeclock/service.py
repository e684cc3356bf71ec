from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_local, parse_timestamp
from ..core.enums import PunchAction, PunchState
from ..core.exceptions import InvalidTimestamp, InvalidTransition, MissingField
from ..employees.repository import EmployeeRepository
from .model import Punch
from .repository import PunchRepository
from .state import next_state, punch_state

logger = logging.getLogger(__name__)


class PunchService:
    """Use case: clock in/out and breaks, always against the employee's latest open punch."""

    def __init__(self, punches: PunchRepository, employees: EmployeeRepository):
        self._punches = punches
        self._employees = employees

    @staticmethod
    def _employee_id(employee_id: Any) -> int:
        if employee_id in (None, ""):
            raise MissingField("employeeId required")
        try:
            return int(employee_id)
        except (TypeError, ValueError):
            raise MissingField("employeeId required")

    def _reload(self, punch_id: int) -> Punch:
        punch = self._punches.get_by_id(punch_id)
        if punch is None:
            raise InvalidTransition("Punch disappeared while updating")
        return punch

    def list_punches(self, *, employee_id: Optional[int] = None) -> Sequence[Punch]:
        return self._punches.list_punches(employee_id=employee_id)

    def current_state(self, employee_id: Any) -> PunchState:
        return punch_state(self._punches.get_open_for_employee(self._employee_id(employee_id)))

    def clock_in(self, employee_id: Any, *, at: Any = None, now: Optional[datetime] = None) -> Punch:
        employee_id = self._employee_id(employee_id)
        open_punch = self._punches.get_open_for_employee(employee_id)
        next_state(punch_state(open_punch), PunchAction.CLOCK_IN)

        now = now or now_local()
        clock_in = parse_timestamp(at) if at not in (None, "") else now
        if clock_in > now:
            raise InvalidTimestamp("Clock-in cannot be in the future")
        employee = self._employees.get_by_id(employee_id)
        name = employee.name if employee else "Unknown"

        punch_id = self._punches.create_punch(employee_id=employee_id, employee_name=name, clock_in=clock_in)
        logger.info("Employee %s clocked in at %s (punch %s)", employee_id, clock_in.isoformat(), punch_id)
        return self._reload(punch_id)

    def start_break(self, employee_id: Any, *, now: Optional[datetime] = None) -> Punch:
        employee_id = self._employee_id(employee_id)
        punch = self._punches.get_open_for_employee(employee_id)
        next_state(punch_state(punch), PunchAction.BREAK_START)

        start = now or now_local()
        if start < punch.clock_in:
            raise InvalidTimestamp("Break cannot start before clock-in")
        if not self._punches.add_break(punch_id=punch.punch_id, start=start):
            raise InvalidTransition("Break already in progress")
        logger.info("Employee %s started a break (punch %s)", employee_id, punch.punch_id)
        return self._reload(punch.punch_id)

    def end_break(self, employee_id: Any, *, now: Optional[datetime] = None) -> Punch:
        employee_id = self._employee_id(employee_id)
        punch = self._punches.get_open_for_employee(employee_id)
        next_state(punch_state(punch), PunchAction.BREAK_END)

        open_break = punch.open_break
        end = now or now_local()
        if end < open_break.start:
            raise InvalidTimestamp("Break cannot end before it starts")
        if not self._punches.close_break(break_id=open_break.break_id, end=end):
            raise InvalidTransition("No active break")
        logger.info("Employee %s ended a break (punch %s)", employee_id, punch.punch_id)
        return self._reload(punch.punch_id)

    def clock_out(self, employee_id: Any, *, now: Optional[datetime] = None) -> Punch:
        employee_id = self._employee_id(employee_id)
        punch = self._punches.get_open_for_employee(employee_id)
        next_state(punch_state(punch), PunchAction.CLOCK_OUT)

        clock_out = now or now_local()
        if clock_out < punch.clock_in:
            raise InvalidTimestamp("Clock-out cannot precede clock-in")

        # Leaving while on break ends the break at the same instant.
        open_break = punch.open_break
        if open_break is not None:
            self._punches.close_break(break_id=open_break.break_id, end=max(clock_out, open_break.start))

        if not self._punches.set_clock_out(punch_id=punch.punch_id, clock_out=clock_out):
            raise InvalidTransition("No open punch")
        logger.info("Employee %s clocked out at %s (punch %s)", employee_id, clock_out.isoformat(), punch.punch_id)
        return self._reload(punch.punch_id)
