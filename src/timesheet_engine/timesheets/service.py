from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.time_utils import monday_of_week, round_hours
from ..core import constants
from ..core.enums import TimesheetStatus
from ..core.exceptions import ValidationError
from ..payroll.service import TimesheetCalculationService
from ..validation.break_validator import validate_day
from .model import DayEntry, Timesheet, WeeklyTotals
from .policy import missing_reasons

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayDefaults:
    time_in: str = constants.DEFAULT_TIME_IN
    time_out: str = constants.DEFAULT_TIME_OUT
    meal_break_start: str = constants.DEFAULT_MEAL_BREAK_START
    meal_break_end: str = constants.DEFAULT_MEAL_BREAK_END
    am_break_start: str = constants.DEFAULT_AM_BREAK_START
    am_break_end: str = constants.DEFAULT_AM_BREAK_END
    pm_break_start: str = constants.DEFAULT_PM_BREAK_START
    pm_break_end: str = constants.DEFAULT_PM_BREAK_END


class TimesheetService:
    """Week-level workflow on in-memory timesheets; callers persist the result."""

    def __init__(
        self,
        calculation: Optional[TimesheetCalculationService] = None,
        *,
        defaults: Optional[DayDefaults] = None,
    ):
        self._calculation = calculation or TimesheetCalculationService()
        self._defaults = defaults or DayDefaults()

    def new_week(self, *, user_id: Optional[int], week_start: date) -> Timesheet:
        """Draft timesheet for the week containing week_start.

        Weekdays are pre-filled with the default schedule; weekends start as
        not worked.
        """
        d = self._defaults
        days = {}
        for name in constants.DAY_ORDER:
            if name in constants.WEEKEND_DAYS:
                days[name] = DayEntry(did_not_work=True)
            else:
                days[name] = DayEntry(
                    time_in=d.time_in,
                    time_out=d.time_out,
                    meal_break_start=d.meal_break_start,
                    meal_break_end=d.meal_break_end,
                    am_break_start=d.am_break_start,
                    am_break_end=d.am_break_end,
                    pm_break_start=d.pm_break_start,
                    pm_break_end=d.pm_break_end,
                )

        timesheet = Timesheet(days=days, user_id=user_id, week_start_date=monday_of_week(week_start))
        self._calculation.compute_week(timesheet)
        return timesheet

    def recalculate(self, timesheet: Timesheet) -> WeeklyTotals:
        return self._calculation.compute_week(timesheet)

    def validate_week(self, timesheet: Timesheet) -> dict[str, list[str]]:
        errors: dict[str, list[str]] = {}
        for name, entry in timesheet.iter_days():
            result = validate_day(entry)
            if not result.valid:
                errors[name] = list(result.errors)
        return errors

    def out_of_town_total(self, timesheet: Timesheet) -> float:
        """Informational out-of-town time; never part of the pay buckets."""
        total = sum(e.out_of_town_hours + e.out_of_town_minutes / 60 for _, e in timesheet.iter_days())
        return round_hours(total)

    def submit(self, timesheet: Timesheet) -> WeeklyTotals:
        totals = self._check_ready(timesheet)
        timesheet.status = TimesheetStatus.SUBMITTED
        return totals

    def certify(self, timesheet: Timesheet) -> WeeklyTotals:
        totals = self._check_ready(timesheet)
        timesheet.status = TimesheetStatus.CERTIFIED
        timesheet.certified = True
        logger.info("Timesheet certified: user=%s week=%s total=%.2f", timesheet.user_id, timesheet.week_start_date, totals.total)
        return totals

    def _check_ready(self, timesheet: Timesheet) -> WeeklyTotals:
        if timesheet.certified:
            raise ValidationError("Timesheet is already certified")

        totals = self._calculation.compute_week(timesheet)

        errors = self.validate_week(timesheet)
        if errors:
            raise ValidationError("Please fix the validation errors before submitting.", errors)

        missing = missing_reasons(timesheet)
        if missing:
            raise ValidationError(
                "A reason is required for: " + ", ".join(missing),
                {name: ["A reason is required for this day"] for name in missing},
            )
        return totals
