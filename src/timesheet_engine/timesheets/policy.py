from __future__ import annotations

from typing import Optional

from ..core.constants import WEEKEND_DAYS
from .model import DayEntry, DayHours, Timesheet


def reason_required(day_name: str, entry: DayEntry, hours: Optional[DayHours] = None) -> bool:
    """Whether the employee must explain this day.

    A reason is needed for a weekday off, any weekend day not marked off, or
    any overtime or double time. Without explicit hours the values stored on the entry are used.
    """
    is_weekend = day_name in WEEKEND_DAYS
    if entry.did_not_work:
        return not is_weekend
    if is_weekend:
        # Weekend days not marked off are explained even before times are entered.
        return True

    if hours is not None:
        overtime, double_time = hours.overtime, hours.double_time
    else:
        overtime, double_time = entry.total_overtime_hours, entry.total_double_time_hours
    return overtime > 0 or double_time > 0


def missing_reasons(timesheet: Timesheet) -> list[str]:
    """Days that need a reason but have none (blank counts as none)."""
    return [
        name
        for name, entry in timesheet.iter_days()
        if reason_required(name, entry) and not entry.reasons.strip()
    ]
