from __future__ import annotations

from .base import WorkedHoursCalculator
from ...breaks.evaluator import evaluate_breaks
from ...common.time_utils import hours_between, round_hours
from ...timesheets.model import DayEntry


class StandardWorkedHoursCalculator(WorkedHoursCalculator):
    """Standard rule: (out - in) - meal - rest breaks over 10 min, not below 0."""

    def worked_hours(self, entry: DayEntry) -> float:
        if entry.did_not_work or not entry.time_in or not entry.time_out:
            return 0.0
        hours = hours_between(entry.time_in, entry.time_out)
        for evaluation in evaluate_breaks(entry):
            if evaluation.deductible:
                hours -= evaluation.hours
        return max(0.0, round_hours(hours))
