from __future__ import annotations

import pytest

from timesheet_engine.core.constants import DAY_ORDER
from timesheet_engine.timesheets.model import DayEntry, Timesheet


def work_day(time_in="08:00", time_out="16:30", **kwargs) -> DayEntry:
    return DayEntry(time_in=time_in, time_out=time_out, **kwargs)


def off_day(**kwargs) -> DayEntry:
    return DayEntry(did_not_work=True, **kwargs)


def standard_day(**overrides) -> DayEntry:
    """08:00-16:30 with a 30 min meal and two paid 10 min rest breaks (8.00h)."""
    values = dict(
        time_in="08:00",
        time_out="16:30",
        meal_break_start="12:00",
        meal_break_end="12:30",
        am_break_start="10:00",
        am_break_end="10:10",
        pm_break_start="15:00",
        pm_break_end="15:10",
    )
    values.update(overrides)
    return DayEntry(**values)


@pytest.fixture
def make_week():
    def _make(**days: DayEntry) -> Timesheet:
        return Timesheet(days={name: days.get(name) or off_day() for name in DAY_ORDER})

    return _make


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from timesheet_engine.main import create_app

    return create_app()


@pytest.fixture
def client(app):
    return app.test_client()
