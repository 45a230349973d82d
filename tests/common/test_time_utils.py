from datetime import date

from timesheet_engine.common.time_utils import (
    clock_minutes,
    hours_between,
    minutes_between,
    monday_of_week,
    round_hours,
    week_dates,
)


def test_hours_between_same_day():
    assert hours_between("08:00", "16:30") == 8.5


def test_hours_between_is_not_rounded():
    assert hours_between("08:00", "08:20") == 20 / 60


def test_hours_between_wraps_past_midnight():
    assert hours_between("22:00", "06:00") == 8
    assert minutes_between("23:45", "00:15") == 30


def test_hours_between_missing_or_malformed_is_zero():
    assert hours_between("", "16:00") == 0
    assert hours_between("08:00", None) == 0
    assert hours_between("8am", "16:00") == 0
    assert hours_between("25:00", "16:00") == 0


def test_clock_minutes_accepts_seconds():
    assert clock_minutes("10:10:45") == 610
    assert clock_minutes("00:00") == 0
    assert clock_minutes("") is None


def test_round_hours_half_up():
    assert round_hours(7.755) == 7.76
    assert round_hours(8.333333) == 8.33
    assert round_hours(0.125) == 0.13


def test_monday_of_week():
    assert monday_of_week(date(2025, 3, 12)) == date(2025, 3, 10)  # Wednesday
    assert monday_of_week(date(2025, 3, 16)) == date(2025, 3, 10)  # Sunday
    assert monday_of_week(date(2025, 3, 10)) == date(2025, 3, 10)


def test_week_dates_in_canonical_order():
    dates = week_dates(date(2025, 3, 12))
    assert list(dates) == ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
    assert dates["monday"] == date(2025, 3, 10)
    assert dates["sunday"] == date(2025, 3, 16)
