from __future__ import annotations

from enum import Enum


class DayName(str, Enum):
    """Weekday keys used by timesheets, in canonical order."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


class BreakKind(str, Enum):
    MEAL = "meal"
    AM = "am"
    PM = "pm"


class TimesheetStatus(str, Enum):
    """Lifecycle of a weekly timesheet as stored by the application."""

    DRAFT = "draft"
    SUBMITTED = "submitted"
    CERTIFIED = "certified"
    REJECTED = "rejected"
