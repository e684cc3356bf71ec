from datetime import date

import pytest

from src.shift_tracker.shift_tracker.core.enums import Role
from src.shift_tracker.shift_tracker.core.exceptions import (
    AuthorizationError,
    InvalidTime,
    MissingField,
    NotFoundError,
    ValidationError,
)
from src.shift_tracker.shift_tracker.shifts.service import ShiftService
from tests.fakes import InMemoryShifts


def _create(service, **overrides):
    fields = dict(
        current_role=Role.MANAGER,
        employee_name="Ana",
        role="Server",
        work_date=date(2026, 3, 14),
        start_time="09:00",
        end_time="17:30",
    )
    fields.update(overrides)
    return service.create(**fields)


def test_create_stores_duration():
    shift = _create(ShiftService(InMemoryShifts()))

    assert shift.shift_id == 1
    assert shift.duration_hours == 8.5


def test_overnight_shift_duration():
    shift = _create(ShiftService(InMemoryShifts()), start_time="22:00", end_time="02:00")

    assert shift.duration_hours == 4.0


def test_times_are_normalized_to_two_digits():
    shift = _create(ShiftService(InMemoryShifts()), start_time="9:00", end_time="17:00")

    assert shift.start_time == "09:00"


def test_zero_length_shift_is_rejected():
    with pytest.raises(ValidationError):
        _create(ShiftService(InMemoryShifts()), start_time="09:00", end_time="09:00")


def test_malformed_time_is_rejected():
    with pytest.raises(InvalidTime):
        _create(ShiftService(InMemoryShifts()), start_time="9x:00")


def test_missing_fields_are_rejected():
    service = ShiftService(InMemoryShifts())

    with pytest.raises(MissingField):
        _create(service, employee_name="  ")
    with pytest.raises(MissingField):
        _create(service, work_date=None)


def test_employees_cannot_schedule():
    with pytest.raises(AuthorizationError):
        _create(ShiftService(InMemoryShifts()), current_role=Role.EMPLOYEE)


def test_list_filters_by_date_range():
    service = ShiftService(InMemoryShifts())
    for day in (10, 14, 20):
        _create(service, work_date=date(2026, 3, day))

    shifts = service.list_shifts(start=date(2026, 3, 12), end=date(2026, 3, 15))

    assert [s.work_date.day for s in shifts] == [14]


def test_inverted_range_is_rejected():
    with pytest.raises(ValidationError):
        ShiftService(InMemoryShifts()).list_shifts(start=date(2026, 3, 15), end=date(2026, 3, 1))


def test_delete_unknown_shift():
    with pytest.raises(NotFoundError):
        ShiftService(InMemoryShifts()).delete(current_role=Role.MANAGER, shift_id=99)
