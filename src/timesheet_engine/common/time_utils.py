from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..core.constants import DAY_ORDER, MINUTES_PER_DAY

_TWO_PLACES = Decimal("0.01")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def format_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def clock_seconds(value: Optional[str]) -> Optional[int]:
    """Seconds since midnight for "HH:MM" or "HH:MM:SS".

    Empty or malformed values yield None so callers can treat them as absent.
    """
    if not value:
        return None
    parts = str(value).strip().split(":")
    if len(parts) not in (2, 3):
        return None
    try:
        numbers = [int(p) for p in parts]
    except ValueError:
        return None
    hours, minutes = numbers[0], numbers[1]
    seconds = numbers[2] if len(numbers) == 3 else 0
    if not (0 <= hours < 24 and 0 <= minutes < 60 and 0 <= seconds < 60):
        return None
    return hours * 3600 + minutes * 60 + seconds


def clock_minutes(value: Optional[str]) -> Optional[int]:
    """Whole minutes since midnight, ignoring any seconds component."""
    seconds = clock_seconds(value)
    if seconds is None:
        return None
    return seconds // 60


def minutes_between(start: Optional[str], end: Optional[str]) -> int:
    """Elapsed minutes from start to end, wrapping past midnight when end < start."""
    start_minutes = clock_minutes(start)
    end_minutes = clock_minutes(end)
    if start_minutes is None or end_minutes is None:
        return 0
    if end_minutes < start_minutes:
        end_minutes += MINUTES_PER_DAY
    return end_minutes - start_minutes


def hours_between(start: Optional[str], end: Optional[str]) -> float:
    """Elapsed hours between two clock times, unrounded."""
    return minutes_between(start, end) / 60


def round_hours(value: float) -> float:
    """Round half-up to 2 decimal places."""
    return float(Decimal(str(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def monday_of_week(value: date) -> date:
    """Monday of the week containing value (Sunday belongs to the week before)."""
    return value - timedelta(days=value.weekday())


def week_dates(week_start: date) -> dict[str, date]:
    monday = monday_of_week(week_start)
    return {name: monday + timedelta(days=i) for i, name in enumerate(DAY_ORDER)}
