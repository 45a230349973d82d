from __future__ import annotations

import logging
from typing import Optional

from ..common.time_utils import round_hours
from ..timesheets.model import DayEntry, DayHours, Timesheet, WeeklyTotals
from .classifier import DailyClassifier
from .tracker import build_day_contexts

logger = logging.getLogger(__name__)


class TimesheetCalculationService:
    """The single place where timesheet hours are calculated."""

    def __init__(self, *, classifier: Optional[DailyClassifier] = None):
        self._classifier = classifier or DailyClassifier()

    def classify_day(self, entry: DayEntry, is_weekend: bool, is_seventh_consecutive_day: bool) -> DayHours:
        return self._classifier.classify(
            entry,
            is_weekend=is_weekend,
            is_seventh_consecutive_day=is_seventh_consecutive_day,
        )

    def compute_week(self, timesheet: Timesheet) -> WeeklyTotals:
        """Classify all seven days and sum the buckets.

        Writes the 7th-day flag and per-day hours back onto each entry, and the
        weekly sums onto the timesheet. Recomputing from the same raw times gives
        the same result.
        """
        total_regular = 0.0
        total_overtime = 0.0
        total_double_time = 0.0
        days_worked = 0

        for context in build_day_contexts(timesheet.days):
            # Days removed after construction count as not worked.
            entry = timesheet.days.setdefault(context.day_name, DayEntry())
            hours = self.classify_day(entry, context.is_weekend, context.is_seventh_consecutive_day)

            entry.is_seventh_consecutive_day = context.is_seventh_consecutive_day
            entry.total_regular_hours = hours.regular
            entry.total_overtime_hours = hours.overtime
            entry.total_double_time_hours = hours.double_time

            if entry.is_worked:
                days_worked += 1
            total_regular += hours.regular
            total_overtime += hours.overtime
            total_double_time += hours.double_time

        regular = round_hours(total_regular)
        overtime = round_hours(total_overtime)
        double_time = round_hours(total_double_time)

        timesheet.total_regular_hours = regular
        timesheet.total_overtime_hours = overtime
        timesheet.total_double_time_hours = double_time

        totals = WeeklyTotals(
            regular=regular,
            overtime=overtime,
            double_time=double_time,
            total=round_hours(regular + overtime + double_time),
            days_worked=days_worked,
        )
        logger.debug("Week totals: %s", totals)
        return totals


_default_service = TimesheetCalculationService()


def classify_day(entry: DayEntry, is_weekend: bool, is_seventh_consecutive_day: bool) -> DayHours:
    return _default_service.classify_day(entry, is_weekend, is_seventh_consecutive_day)


def compute_week(timesheet: Timesheet) -> WeeklyTotals:
    return _default_service.compute_week(timesheet)
