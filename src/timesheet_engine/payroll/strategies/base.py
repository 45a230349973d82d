from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class HourSplit:
    regular: float = 0.0
    overtime: float = 0.0
    double_time: float = 0.0


class ClassificationStrategy(ABC):
    """Strategy Pattern: encapsulate how a day's worked hours are paid out."""

    @abstractmethod
    def split(self, worked: float) -> HourSplit:
        raise NotImplementedError
