from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..common.time_utils import clock_seconds
from ..core.constants import MINUTES_PER_DAY, PAID_BREAK_MAX_MINUTES
from ..core.enums import BreakKind
from ..timesheets.model import DayEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BreakEvaluation:
    kind: BreakKind
    minutes: int
    deductible: bool

    @property
    def hours(self) -> float:
        return self.minutes / 60


def break_minutes(start: Optional[str], end: Optional[str]) -> int:
    """Break length rounded to the nearest whole minute.

    Seconds are kept until the final rounding so every break measurement goes
    through the same path. An end earlier than the start wraps past midnight.
    """
    start_seconds = clock_seconds(start)
    end_seconds = clock_seconds(end)
    if start_seconds is None or end_seconds is None:
        return 0
    if end_seconds < start_seconds:
        end_seconds += MINUTES_PER_DAY * 60
    minutes = Decimal(end_seconds - start_seconds) / 60
    return int(minutes.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def is_deductible(start: Optional[str], end: Optional[str]) -> bool:
    """Rest breaks longer than the paid allowance come off worked time."""
    if not start or not end:
        return False
    return break_minutes(start, end) > PAID_BREAK_MAX_MINUTES


def evaluate_break(entry: DayEntry, kind: BreakKind) -> BreakEvaluation:
    start, end = entry.break_window(kind)
    minutes = break_minutes(start, end)
    if kind is BreakKind.MEAL:
        # Meal breaks have no paid allowance.
        deductible = bool(start) and bool(end)
    else:
        deductible = is_deductible(start, end)

    if start and end:
        if deductible:
            logger.debug("%s break is %d min, deducting %.2f hours", kind.value, minutes, minutes / 60)
        else:
            logger.debug("%s break is %d min, within paid allowance", kind.value, minutes)
    return BreakEvaluation(kind=kind, minutes=minutes, deductible=deductible)


def evaluate_breaks(entry: DayEntry) -> list[BreakEvaluation]:
    return [evaluate_break(entry, kind) for kind in (BreakKind.MEAL, BreakKind.AM, BreakKind.PM)]
