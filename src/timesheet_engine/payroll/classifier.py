from __future__ import annotations

from typing import Optional

from ..common.time_utils import round_hours
from ..timesheets.model import DayEntry, DayHours
from .calculator.base import WorkedHoursCalculator
from .calculator.standard_calculator import StandardWorkedHoursCalculator
from .factory import ClassificationStrategyFactory


class DailyClassifier:
    def __init__(
        self,
        *,
        calculator: Optional[WorkedHoursCalculator] = None,
        strategy_factory: Optional[ClassificationStrategyFactory] = None,
    ):
        self._calculator = calculator or StandardWorkedHoursCalculator()
        self._factory = strategy_factory or ClassificationStrategyFactory()

    def classify(self, entry: DayEntry, *, is_weekend: bool, is_seventh_consecutive_day: bool) -> DayHours:
        """Split one day's worked hours into regular/overtime/double-time buckets.

        Out-of-town time on the entry is informational and never counted here.
        """
        if not entry.is_worked:
            return DayHours()

        worked = self._calculator.worked_hours(entry)
        strategy = self._factory.for_day(is_weekend=is_weekend, is_seventh_consecutive_day=is_seventh_consecutive_day)
        split = strategy.split(worked)

        return DayHours(
            regular=round_hours(split.regular),
            overtime=round_hours(split.overtime),
            double_time=round_hours(split.double_time),
            total_worked=worked,
        )
