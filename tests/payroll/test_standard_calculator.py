from datetime import datetime

from src.shift_tracker.shift_tracker.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.shift_tracker.shift_tracker.timeclock.model import BreakInterval, Punch


def _punch(clock_in, clock_out=None, breaks=()):
    return Punch(punch_id=1, employee_id=1, employee_name="A", clock_in=clock_in, clock_out=clock_out, breaks=tuple(breaks))


def test_standard_calculator_subtracts_closed_break():
    punch = _punch(
        datetime(2025, 1, 1, 9, 0),
        datetime(2025, 1, 1, 17, 0),
        [BreakInterval(start=datetime(2025, 1, 1, 12, 0), end=datetime(2025, 1, 1, 12, 30))],
    )

    calc = StandardPayrollCalculator()
    assert calc.worked_minutes(punch) == 450


def test_open_break_is_not_subtracted():
    punch = _punch(
        datetime(2025, 1, 1, 9, 0),
        datetime(2025, 1, 1, 17, 0),
        [BreakInterval(start=datetime(2025, 1, 1, 16, 0))],
    )

    assert StandardPayrollCalculator().worked_minutes(punch) == 480


def test_open_punch_counts_up_to_now():
    punch = _punch(datetime(2025, 1, 1, 9, 0))

    minutes = StandardPayrollCalculator().worked_minutes(punch, now=datetime(2025, 1, 1, 11, 15))
    assert minutes == 135


def test_clock_out_wins_over_now():
    punch = _punch(datetime(2025, 1, 1, 9, 0), datetime(2025, 1, 1, 10, 0))

    assert StandardPayrollCalculator().worked_minutes(punch, now=datetime(2025, 1, 2, 9, 0)) == 60


def test_result_is_floored_at_zero():
    punch = _punch(
        datetime(2025, 1, 1, 9, 0),
        datetime(2025, 1, 1, 9, 30),
        [BreakInterval(start=datetime(2025, 1, 1, 8, 0), end=datetime(2025, 1, 1, 9, 0))],
    )

    assert StandardPayrollCalculator().worked_minutes(punch) == 0
