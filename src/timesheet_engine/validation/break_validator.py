from __future__ import annotations

from typing import Optional

from ..common.time_utils import clock_minutes
from ..core.constants import (
    AM_BREAK_REQUIRED_FROM_MINUTES,
    LONG_SHIFT_MIN_MEAL_MINUTES,
    LONG_SHIFT_MINUTES,
    MEAL_BREAK_REQUIRED_AFTER_MINUTES,
    PM_BREAK_REQUIRED_FROM_MINUTES,
)
from ..timesheets.model import DayEntry, ValidationResult

_FIELD_LABELS = {
    "time_in": "Time in",
    "time_out": "Time out",
    "meal_break_start": "Meal break start",
    "meal_break_end": "Meal break end",
    "am_break_start": "AM break start",
    "am_break_end": "AM break end",
    "pm_break_start": "PM break start",
    "pm_break_end": "PM break end",
}


def _read_times(entry: DayEntry, errors: list[str]) -> dict[str, Optional[int]]:
    times: dict[str, Optional[int]] = {}
    for attr, label in _FIELD_LABELS.items():
        raw = getattr(entry, attr)
        minutes = clock_minutes(raw)
        if raw and minutes is None:
            errors.append(f"{label} must be a valid HH:MM time")
        times[attr] = minutes
    return times


def _check_pair(
    errors: list[str],
    *,
    label: str,
    start: Optional[int],
    end: Optional[int],
) -> bool:
    """Report a half-entered break; True when both ends are present."""
    if (start is None) != (end is None):
        errors.append(f"Both {label} start and end times must be provided")
        return False
    return start is not None


def validate_day(entry: DayEntry) -> ValidationResult:
    """Check one day's clock and break entries.

    Every applicable rule is reported; nothing is raised. An empty day is valid
    so a timesheet can be saved before it is filled in.
    """
    if entry.did_not_work:
        return ValidationResult(valid=True)

    errors: list[str] = []
    t = _read_times(entry, errors)
    time_in, time_out = t["time_in"], t["time_out"]
    meal_start, meal_end = t["meal_break_start"], t["meal_break_end"]
    am_start, am_end = t["am_break_start"], t["am_break_end"]
    pm_start, pm_end = t["pm_break_start"], t["pm_break_end"]

    if time_in is None and time_out is None:
        return ValidationResult(valid=not errors, errors=tuple(errors))

    if time_in is not None and time_out is None:
        errors.append("Time out is required if time in is provided")
    if time_in is None and time_out is not None:
        errors.append("Time in is required if time out is provided")
    if time_in is not None and time_out is not None and time_in >= time_out:
        errors.append("Time in must be before time out")

    if _check_pair(errors, label="meal break", start=meal_start, end=meal_end):
        if meal_start >= meal_end:
            errors.append("Meal break start must be before meal break end")
        if time_in is not None and meal_start < time_in:
            errors.append("Meal break start must be after time in")
        if time_out is not None and meal_end > time_out:
            errors.append("Meal break end must be before time out")

    if _check_pair(errors, label="AM break", start=am_start, end=am_end):
        if am_start >= am_end:
            errors.append("AM break start must be before AM break end")
        if time_in is not None and am_start < time_in:
            errors.append("AM break start must be after time in")
        if meal_start is not None and am_end > meal_start:
            errors.append("AM break must end before meal break starts")
        if time_out is not None and am_end > time_out:
            errors.append("AM break end must be before time out")

    if _check_pair(errors, label="PM break", start=pm_start, end=pm_end):
        if pm_start >= pm_end:
            errors.append("PM break start must be before PM break end")
        if meal_end is not None and pm_start < meal_end:
            errors.append("PM break must start after meal break ends")
        if time_in is not None and pm_start < time_in:
            errors.append("PM break start must be after time in")
        if time_out is not None and pm_end > time_out:
            errors.append("PM break end must be before time out")

    # California meal and rest break requirements.
    if time_in is not None and time_out is not None:
        shift = time_out - time_in
        if shift > MEAL_BREAK_REQUIRED_AFTER_MINUTES and meal_start is None:
            errors.append("A meal break is required for shifts longer than 5 hours")
        # Checked against the one recorded meal break; there is no second meal pair.
        if shift > LONG_SHIFT_MINUTES and meal_start is not None and meal_end is not None:
            if meal_end - meal_start < LONG_SHIFT_MIN_MEAL_MINUTES:
                errors.append("Meal break must be at least 30 minutes for shifts over 10 hours")
        if shift >= AM_BREAK_REQUIRED_FROM_MINUTES and am_start is None:
            errors.append("A rest break is required for shifts of 3.5 hours or more")
        if shift >= PM_BREAK_REQUIRED_FROM_MINUTES and pm_start is None:
            errors.append("A second rest break is required for shifts of 6 hours or more")

    return ValidationResult(valid=not errors, errors=tuple(errors))
