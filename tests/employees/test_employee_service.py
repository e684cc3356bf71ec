from datetime import date

import pytest

from src.shift_tracker.shift_tracker.core.enums import EmployeeStatus, Role
from src.shift_tracker.shift_tracker.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.shift_tracker.shift_tracker.employees.service import EmployeeService
from tests.fakes import InMemoryEmployees


def test_create_fills_defaults():
    service = EmployeeService(InMemoryEmployees())

    emp = service.create(current_role=Role.MANAGER, name=" Ana ", hourly_rate="18.5", join_date="2026-01-05T10:00:00Z")

    assert emp.name == "Ana"
    assert emp.hourly_rate == 18.5
    assert emp.department == "Front of House"
    assert emp.status == EmployeeStatus.ACTIVE
    assert emp.join_date == date(2026, 1, 5)


def test_update_whitelisted_fields():
    service = EmployeeService(InMemoryEmployees())
    emp = service.create(current_role=Role.MANAGER, name="Ana")

    updated = service.update(
        current_role=Role.MANAGER,
        employee_id=emp.employee_id,
        changes={"hourly_rate": 22, "status": "inactive"},
    )

    assert updated.hourly_rate == 22
    assert updated.status == EmployeeStatus.INACTIVE


def test_update_rejects_unknown_fields():
    service = EmployeeService(InMemoryEmployees())
    emp = service.create(current_role=Role.MANAGER, name="Ana")

    with pytest.raises(ValidationError):
        service.update(current_role=Role.MANAGER, employee_id=emp.employee_id, changes={"user_id": 5})


def test_negative_rate_is_rejected():
    with pytest.raises(ValidationError):
        EmployeeService(InMemoryEmployees()).create(current_role=Role.MANAGER, name="Ana", hourly_rate=-1)


def test_only_managers_edit_the_roster():
    with pytest.raises(AuthorizationError):
        EmployeeService(InMemoryEmployees()).create(current_role=Role.EMPLOYEE, name="Ana")


def test_delete_and_lookup_missing():
    service = EmployeeService(InMemoryEmployees())
    emp = service.create(current_role=Role.MANAGER, name="Ana")
    service.delete(current_role=Role.MANAGER, employee_id=emp.employee_id)

    with pytest.raises(NotFoundError):
        service.get(emp.employee_id)
    with pytest.raises(NotFoundError):
        service.delete(current_role=Role.MANAGER, employee_id=emp.employee_id)
