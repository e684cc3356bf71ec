from datetime import date, datetime

import pytest

from src.shift_tracker.shift_tracker.core.enums import PunchState
from src.shift_tracker.shift_tracker.core.exceptions import InvalidTimestamp, InvalidTransition, MissingField
from src.shift_tracker.shift_tracker.payroll.service import PayrollReportService
from src.shift_tracker.shift_tracker.timeclock.service import PunchService
from tests.fakes import InMemoryEmployees, InMemoryPunches, InMemoryTips, employee


def _at(hour, minute=0):
    return datetime(2026, 3, 14, hour, minute)


@pytest.fixture
def punches():
    return InMemoryPunches()


@pytest.fixture
def employees():
    return InMemoryEmployees([employee(1, "Ana", hourly_rate=20.0), employee(2, "Ben")])


@pytest.fixture
def service(punches, employees):
    return PunchService(punches, employees)


def test_full_day_lifecycle(service):
    punch = service.clock_in(1, now=_at(9))
    assert punch.employee_name == "Ana"
    assert service.current_state(1) == PunchState.PUNCHED_IN

    service.start_break(1, now=_at(12))
    assert service.current_state(1) == PunchState.ON_BREAK

    service.end_break(1, now=_at(12, 30))
    punch = service.clock_out(1, now=_at(17))

    assert punch.clock_out == _at(17)
    assert [(b.start, b.end) for b in punch.breaks] == [(_at(12), _at(12, 30))]
    assert service.current_state(1) == PunchState.NOT_PUNCHED_IN


def test_explicit_clock_in_time_is_used(service):
    punch = service.clock_in(1, at="2026-03-14T08:45:00", now=_at(9))

    assert punch.clock_in == datetime(2026, 3, 14, 8, 45)


def test_unparseable_clock_in_time_is_rejected(service):
    with pytest.raises(InvalidTimestamp):
        service.clock_in(1, at="yesterday-ish")


def test_missing_employee_is_rejected(service):
    with pytest.raises(MissingField):
        service.clock_in(None)


def test_unknown_employee_is_named_unknown(service):
    assert service.clock_in(42, now=_at(9)).employee_name == "Unknown"


def test_double_clock_in_is_rejected(service):
    service.clock_in(1, now=_at(9))

    with pytest.raises(InvalidTransition, match="Already clocked in"):
        service.clock_in(1, now=_at(10))


def test_break_end_without_break_is_rejected(service):
    service.clock_in(1, now=_at(9))

    with pytest.raises(InvalidTransition, match="No active break"):
        service.end_break(1, now=_at(10))


def test_second_break_start_is_rejected(service):
    service.clock_in(1, now=_at(9))
    service.start_break(1, now=_at(10))

    with pytest.raises(InvalidTransition):
        service.start_break(1, now=_at(10, 5))


def test_clock_out_without_punch_is_rejected(service):
    with pytest.raises(InvalidTransition, match="No open punch"):
        service.clock_out(2, now=_at(17))


def test_clock_out_before_clock_in_is_rejected(service):
    service.clock_in(1, now=_at(9))

    with pytest.raises(InvalidTimestamp):
        service.clock_out(1, now=_at(8))


def test_clock_out_while_on_break_closes_the_break(service):
    service.clock_in(1, now=_at(9))
    service.start_break(1, now=_at(16))

    punch = service.clock_out(1, now=_at(17))

    assert punch.open_break is None
    assert punch.breaks[0].end == _at(17)


def test_punches_are_independent_per_employee(service):
    service.clock_in(1, now=_at(9))
    service.clock_in(2, now=_at(9, 5))
    service.clock_out(1, now=_at(10))

    assert service.current_state(1) == PunchState.NOT_PUNCHED_IN
    assert service.current_state(2) == PunchState.PUNCHED_IN


def test_clock_in_after_clock_out_opens_a_new_punch(service):
    service.clock_in(1, now=_at(9))
    service.clock_out(1, now=_at(11))
    service.clock_in(1, now=_at(13))

    assert len(service.list_punches(employee_id=1)) == 2


def test_workday_ends_up_in_the_daily_report(service, punches, employees):
    service.clock_in(1, now=_at(9))
    service.start_break(1, now=_at(12))
    service.end_break(1, now=_at(12, 30))
    service.clock_out(1, now=_at(17))

    reports = PayrollReportService(punches, InMemoryTips(), employees)
    report = reports.daily_report(date(2026, 3, 14), now=_at(23))

    row = report.per_employee[0]
    assert row.hours_worked == 7.5
    assert row.wages == 150.0


def test_future_clock_in_is_rejected(service):
    with pytest.raises(InvalidTimestamp, match="future"):
        service.clock_in(1, at="2099-01-01T09:00:00", now=_at(9))

    assert service.current_state(1) == PunchState.NOT_PUNCHED_IN
    service.clock_in(1, now=_at(9))
    assert service.clock_out(1, now=_at(17)).clock_out == _at(17)
