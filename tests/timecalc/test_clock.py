import pytest

from src.shift_tracker.shift_tracker.core.exceptions import InvalidTime, ValidationError
from src.shift_tracker.shift_tracker.timecalc.clock import duration_hours, format_hhmm, round2, to_minutes


@pytest.mark.parametrize(
    "start, end, expected",
    [
        ("09:00", "17:00", 8.0),
        ("09:00", "17:30", 8.5),
        ("10:15", "10:35", 0.33),
        ("06:00", "06:01", 0.02),
    ],
)
def test_same_day_duration(start, end, expected):
    assert duration_hours(start, end) == expected


def test_overnight_shift_wraps_past_midnight():
    assert duration_hours("22:00", "02:00") == 4.0
    assert duration_hours("23:30", "00:15") == 0.75


def test_equal_start_and_end_is_zero_not_a_full_day():
    assert duration_hours("09:00", "09:00") == 0


@pytest.mark.parametrize("bad", ["9x:00", "", "0900", "ab:cd", "24:00", "12:60", "-1:30", None])
def test_unusable_time_raises_invalid_time(bad):
    with pytest.raises(InvalidTime):
        to_minutes(bad)


def test_invalid_time_is_a_validation_error():
    with pytest.raises(ValidationError):
        duration_hours("9x:00", "10:00")


def test_round2_rounds_halves_up():
    assert round2(0.125) == 0.13
    assert round2(0.375) == 0.38
    assert round2(7.5) == 7.5


def test_format_hhmm_pads():
    assert format_hhmm(to_minutes("9:05")) == "09:05"
    assert format_hhmm(0) == "00:00"
