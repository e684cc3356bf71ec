from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import optional_rate, require_non_empty
from ..core.constants import DEFAULT_DEPARTMENT
from ..core.enums import EmployeeStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def _coerce_status(value: Any) -> EmployeeStatus:
    try:
        return EmployeeStatus(value or EmployeeStatus.ACTIVE.value)
    except ValueError:
        raise ValidationError(f"Unknown employee status {value!r}")


def _coerce_join_date(value: Any) -> Optional[date]:
    if value in (None, ""):
        return None
    if isinstance(value, date):
        return value
    # The roster accepts full ISO timestamps too; only the day matters.
    return parse_iso_date(str(value)[:10])


class EmployeeService:
    """Use case: manage the employee roster (manager/admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def create(
        self,
        *,
        current_role: Role,
        name: str,
        email: Optional[str] = None,
        role: Optional[str] = None,
        department: Optional[str] = None,
        level: Optional[str] = None,
        hourly_rate: Any = None,
        status: Any = None,
        join_date: Any = None,
        user_id: Optional[int] = None,
    ) -> Employee:
        if not current_role.can_manage:
            raise AuthorizationError("Only managers can add employees")

        employee = Employee(
            employee_id=0,
            user_id=user_id,
            name=require_non_empty(name, "Name"),
            email=(email or "").strip() or None,
            role=(role or "").strip() or None,
            department=(department or "").strip() or DEFAULT_DEPARTMENT,
            level=(level or "").strip() or None,
            hourly_rate=optional_rate(hourly_rate),
            status=_coerce_status(status),
            join_date=_coerce_join_date(join_date) or date.today(),
        )
        employee_id = self._employees.create(employee)
        logger.info("Employee %s created (%s)", employee_id, employee.name)
        return self.get(employee_id)

    def update(self, *, current_role: Role, employee_id: int, changes: dict[str, Any]) -> Employee:
        if not current_role.can_manage:
            raise AuthorizationError("Only managers can edit employees")

        self.get(employee_id)

        cleaned: dict[str, Any] = {}
        for key, value in changes.items():
            if key == "name":
                cleaned[key] = require_non_empty(value, "Name")
            elif key == "hourly_rate":
                cleaned[key] = optional_rate(value)
            elif key == "status":
                cleaned[key] = _coerce_status(value)
            elif key == "join_date":
                cleaned[key] = _coerce_join_date(value)
            elif key in ("email", "role", "department", "level"):
                cleaned[key] = (value or "").strip() or None
            else:
                raise ValidationError(f"Field {key!r} cannot be updated")

        if cleaned:
            self._employees.update(int(employee_id), cleaned)
        return self.get(employee_id)

    def delete(self, *, current_role: Role, employee_id: int) -> None:
        if not current_role.can_manage:
            raise AuthorizationError("Only managers can delete employees")

        if not self._employees.delete(int(employee_id)):
            raise NotFoundError("Employee not found")
        logger.info("Employee %s deleted", employee_id)
