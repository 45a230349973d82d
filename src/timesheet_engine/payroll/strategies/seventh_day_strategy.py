from __future__ import annotations

from ...core.constants import SEVENTH_DAY_OVERTIME_HOURS
from .base import ClassificationStrategy, HourSplit


class SeventhDayStrategy(ClassificationStrategy):
    """7th consecutive workday: first 8h overtime, the rest double time."""

    def split(self, worked: float) -> HourSplit:
        if worked <= SEVENTH_DAY_OVERTIME_HOURS:
            return HourSplit(overtime=worked)
        return HourSplit(overtime=SEVENTH_DAY_OVERTIME_HOURS, double_time=worked - SEVENTH_DAY_OVERTIME_HOURS)
