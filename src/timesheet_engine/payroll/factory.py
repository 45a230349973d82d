from __future__ import annotations

from dataclasses import dataclass

from .strategies.base import ClassificationStrategy
from .strategies.seventh_day_strategy import SeventhDayStrategy
from .strategies.weekday_strategy import WeekdayStrategy
from .strategies.weekend_strategy import WeekendStrategy


@dataclass
class ClassificationStrategyFactory:
    """Factory Pattern: choose the pay rule for a day.

    A 7th consecutive day takes precedence over the weekend rule.
    """

    def for_day(self, *, is_weekend: bool, is_seventh_consecutive_day: bool) -> ClassificationStrategy:
        if is_seventh_consecutive_day:
            return SeventhDayStrategy()
        if is_weekend:
            return WeekendStrategy()
        return WeekdayStrategy()
