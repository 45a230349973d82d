from __future__ import annotations

import logging
from typing import Mapping

from ..core.constants import DAY_ORDER, SEVENTH_CONSECUTIVE_DAY, WEEKEND_DAYS
from ..timesheets.model import DayContext, DayEntry

logger = logging.getLogger(__name__)


def build_day_contexts(days: Mapping[str, DayEntry]) -> list[DayContext]:
    """Walk the week in canonical order and annotate each day.

    The streak counts unbroken worked days up to and including the day; any day
    not worked (or missing) resets it. Entries are not modified.
    """
    contexts: list[DayContext] = []
    streak = 0
    for day_name in DAY_ORDER:
        entry = days.get(day_name)
        if entry is not None and entry.is_worked:
            streak += 1
        else:
            streak = 0

        is_seventh = streak >= SEVENTH_CONSECUTIVE_DAY
        if is_seventh:
            logger.debug("%s is consecutive workday %d", day_name, streak)

        contexts.append(
            DayContext(
                day_name=day_name,
                streak=streak,
                is_weekend=day_name in WEEKEND_DAYS,
                is_seventh_consecutive_day=is_seventh,
            )
        )
    return contexts
