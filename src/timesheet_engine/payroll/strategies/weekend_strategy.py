from __future__ import annotations

from .base import ClassificationStrategy, HourSplit


class WeekendStrategy(ClassificationStrategy):
    """Saturday/Sunday work is all overtime."""

    def split(self, worked: float) -> HourSplit:
        return HourSplit(overtime=worked)
