from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import optional_rate, require_min_length, require_non_empty
from ..core.constants import DEFAULT_DEPARTMENT, DEFAULT_HOURLY_RATE
from ..core.enums import EmployeeStatus, Role
from ..core.exceptions import AuthenticationError, MissingField, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    name: str
    email: str
    role: Role
    employee_id: Optional[int]

    def to_dict(self) -> dict:
        return {
            "id": self.user_id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "employeeId": self.employee_id,
        }


class AuthService:
    """Use case: register and authenticate accounts."""

    def __init__(self, users: UserRepository, employees: EmployeeRepository):
        self._users = users
        self._employees = employees

    def _session_user(self, user) -> SessionUser:
        employee = self._employees.get_by_user_id(user.user_id)
        return SessionUser(
            user_id=user.user_id,
            name=user.name,
            email=user.email,
            role=user.role,
            employee_id=employee.employee_id if employee else None,
        )

    def authenticate(self, email: str, password: str) -> SessionUser:
        if not email or not password:
            raise MissingField("Missing credentials")

        user = self._users.get_by_email(email.strip().lower())
        if not user:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid credentials")
        return self._session_user(user)

    def register(
        self,
        *,
        name: str,
        email: str,
        password: str,
        role: Any = Role.EMPLOYEE.value,
        hourly_rate: Any = None,
    ) -> SessionUser:
        """Create a login account and the matching roster entry."""
        name = require_non_empty(name, "name")
        email = require_non_empty(email, "email").lower()
        require_min_length(password, "password", 6)

        try:
            role = Role(role or Role.EMPLOYEE.value)
        except ValueError:
            raise ValidationError(f"Unknown role {role!r}")
        if role == Role.ADMIN:
            raise ValidationError("Admin accounts cannot be self-registered")

        if self._users.get_by_email(email):
            raise ValidationError("Email already registered")

        user_id = self._users.create_user(
            name=name,
            email=email,
            password_hash=generate_password_hash(password),
            role=role,
        )
        rate = optional_rate(hourly_rate)
        self._employees.create(
            Employee(
                employee_id=0,
                user_id=user_id,
                name=name,
                email=email,
                role=role.value,
                department=DEFAULT_DEPARTMENT,
                level="Manager" if role == Role.MANAGER else "Employee",
                hourly_rate=rate if rate is not None else float(DEFAULT_HOURLY_RATE),
                status=EmployeeStatus.ACTIVE,
                join_date=date.today(),
            )
        )
        logger.info("Registered %s account %s", role.value, email)

        user = self._users.get_by_id(user_id)
        if user is None:
            raise ValidationError("Registration failed")
        return self._session_user(user)
