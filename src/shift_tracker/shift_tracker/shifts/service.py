from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, MissingField, NotFoundError, ValidationError
from ..timecalc.clock import duration_hours, format_hhmm, to_minutes
from .model import Shift
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


class ShiftService:
    def __init__(self, shifts: ShiftRepository):
        self._shifts = shifts

    def list_shifts(
        self,
        *,
        employee_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[Shift]:
        if start and end and start > end:
            raise ValidationError("start must not be after end")
        return self._shifts.list_shifts(employee_id=employee_id, start=start, end=end)

    def create(
        self,
        *,
        current_role: Role,
        employee_name: str,
        role: str,
        work_date: date,
        start_time: str,
        end_time: str,
        employee_id: Optional[int] = None,
    ) -> Shift:
        if not current_role.can_manage:
            raise AuthorizationError("Only managers can create shifts")

        employee_name = require_non_empty(employee_name, "employee")
        role = require_non_empty(role, "role")
        start_time = require_non_empty(start_time, "startTime")
        end_time = require_non_empty(end_time, "endTime")
        if work_date is None:
            raise MissingField("date is required")

        start_time = format_hhmm(to_minutes(start_time))
        end_time = format_hhmm(to_minutes(end_time))
        hours = duration_hours(start_time, end_time)
        if hours <= 0:
            raise ValidationError("Shift must end at a different time than it starts")

        shift = Shift(
            shift_id=0,
            employee_id=employee_id,
            employee_name=employee_name,
            role=role,
            work_date=work_date,
            start_time=start_time,
            end_time=end_time,
            duration_hours=hours,
        )
        shift_id = self._shifts.create(shift)
        logger.info("Shift %s created for %s on %s (%.2fh)", shift_id, employee_name, work_date, hours)
        return self._shifts.get_by_id(shift_id) or replace(shift, shift_id=shift_id)

    def delete(self, *, current_role: Role, shift_id: int) -> None:
        if not current_role.can_manage:
            raise AuthorizationError("Only managers can delete shifts")

        if not self._shifts.delete(int(shift_id)):
            raise NotFoundError("Shift not found")
