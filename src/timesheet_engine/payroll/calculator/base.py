from __future__ import annotations

from abc import ABC, abstractmethod

from ...timesheets.model import DayEntry


class WorkedHoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked time)."""

    @abstractmethod
    def worked_hours(self, entry: DayEntry) -> float:
        raise NotImplementedError
