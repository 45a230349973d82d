from __future__ import annotations

from ...core.constants import DOUBLE_TIME_AFTER_HOURS, REGULAR_HOURS_PER_DAY
from .base import ClassificationStrategy, HourSplit


class WeekdayStrategy(ClassificationStrategy):
    """Ordinary workday: 8h regular, up to 12h overtime, double time beyond."""

    def split(self, worked: float) -> HourSplit:
        if worked <= REGULAR_HOURS_PER_DAY:
            return HourSplit(regular=worked)
        if worked <= DOUBLE_TIME_AFTER_HOURS:
            return HourSplit(regular=REGULAR_HOURS_PER_DAY, overtime=worked - REGULAR_HOURS_PER_DAY)
        return HourSplit(
            regular=REGULAR_HOURS_PER_DAY,
            overtime=DOUBLE_TIME_AFTER_HOURS - REGULAR_HOURS_PER_DAY,
            double_time=worked - DOUBLE_TIME_AFTER_HOURS,
        )
