from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from ..common.time_utils import format_date, parse_iso_date
from ..core.constants import DAY_ORDER
from ..core.enums import BreakKind, TimesheetStatus
from ..core.exceptions import ValidationError

# Python attribute -> wire name used by the web client and storage layer.
_DAY_FIELDS = {
    "did_not_work": "didNotWork",
    "time_in": "timeIn",
    "time_out": "timeOut",
    "meal_break_start": "mealBreakStart",
    "meal_break_end": "mealBreakEnd",
    "am_break_start": "amBreakStart",
    "am_break_end": "amBreakEnd",
    "pm_break_start": "pmBreakStart",
    "pm_break_end": "pmBreakEnd",
    "out_of_town_hours": "outOfTownHours",
    "out_of_town_minutes": "outOfTownMinutes",
    "reasons": "reasons",
    "total_regular_hours": "totalRegularHours",
    "total_overtime_hours": "totalOvertimeHours",
    "total_double_time_hours": "totalDoubleTimeHours",
    "is_seventh_consecutive_day": "isSeventhConsecutiveDay",
}


@dataclass
class DayEntry:
    """One calendar day of a timesheet week.

    Clock fields hold "HH:MM" strings; an empty string means not entered.
    The total_* fields and is_seventh_consecutive_day are written back by the
    weekly computation.
    """

    did_not_work: bool = False
    time_in: str = ""
    time_out: str = ""
    meal_break_start: str = ""
    meal_break_end: str = ""
    am_break_start: str = ""
    am_break_end: str = ""
    pm_break_start: str = ""
    pm_break_end: str = ""
    out_of_town_hours: int = 0
    out_of_town_minutes: int = 0
    reasons: str = ""
    total_regular_hours: float = 0.0
    total_overtime_hours: float = 0.0
    total_double_time_hours: float = 0.0
    is_seventh_consecutive_day: bool = False

    @property
    def is_worked(self) -> bool:
        return not self.did_not_work and bool(self.time_in) and bool(self.time_out)

    def break_window(self, kind: BreakKind) -> tuple[str, str]:
        return (
            getattr(self, f"{kind.value}_break_start"),
            getattr(self, f"{kind.value}_break_end"),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DayEntry":
        values: dict[str, Any] = {}
        for attr, wire in _DAY_FIELDS.items():
            if wire in data:
                values[attr] = data[wire]
            elif attr in data:
                values[attr] = data[attr]

        entry = cls(**values)
        entry.did_not_work = to_bool(entry.did_not_work)
        entry.is_seventh_consecutive_day = to_bool(entry.is_seventh_consecutive_day)
        for attr in ("time_in", "time_out", "meal_break_start", "meal_break_end",
                     "am_break_start", "am_break_end", "pm_break_start", "pm_break_end", "reasons"):
            setattr(entry, attr, str(getattr(entry, attr) or ""))
        entry.out_of_town_hours = _to_int(entry.out_of_town_hours)
        entry.out_of_town_minutes = _to_int(entry.out_of_town_minutes)
        for attr in ("total_regular_hours", "total_overtime_hours", "total_double_time_hours"):
            setattr(entry, attr, _to_float(getattr(entry, attr)))
        return entry

    def to_dict(self) -> dict[str, Any]:
        return {wire: getattr(self, attr) for attr, wire in _DAY_FIELDS.items()}


@dataclass
class Timesheet:
    """A calendar week of day entries, always all seven days."""

    days: dict[str, DayEntry] = field(default_factory=lambda: {name: DayEntry() for name in DAY_ORDER})
    user_id: Optional[int] = None
    week_start_date: Optional[date] = None
    status: TimesheetStatus = TimesheetStatus.DRAFT
    certified: bool = False
    total_regular_hours: float = 0.0
    total_overtime_hours: float = 0.0
    total_double_time_hours: float = 0.0

    def __post_init__(self):
        unknown = sorted(set(self.days) - set(DAY_ORDER))
        if unknown:
            raise ValidationError(f"Unknown day keys: {', '.join(unknown)}")
        # Re-key in canonical order, filling any absent day with an empty entry.
        self.days = {name: self.days.get(name) or DayEntry() for name in DAY_ORDER}

    def iter_days(self):
        for name in DAY_ORDER:
            yield name, self.days.setdefault(name, DayEntry())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Timesheet":
        raw_days = data.get("days") or {}
        if not isinstance(raw_days, dict):
            raise ValidationError("days must be an object keyed by weekday name")
        days = {}
        for name, day in raw_days.items():
            if day is not None and not isinstance(day, dict):
                raise ValidationError(f"Day {name} must be an object")
            days[str(name).lower()] = DayEntry.from_dict(day or {})

        week_start = data.get("weekStartDate")
        try:
            week_start_date = parse_iso_date(str(week_start)[:10]) if week_start else None
        except ValueError as exc:
            raise ValidationError(f"Invalid weekStartDate: {week_start}") from exc

        try:
            status = TimesheetStatus(data.get("status") or TimesheetStatus.DRAFT.value)
        except ValueError as exc:
            raise ValidationError(f"Invalid status: {data.get('status')}") from exc

        user_id = data.get("userId")
        if user_id is not None:
            try:
                user_id = int(user_id)
            except (TypeError, ValueError) as exc:
                raise ValidationError(f"Invalid userId: {user_id}") from exc

        return cls(
            days=days,
            user_id=user_id,
            week_start_date=week_start_date,
            status=status,
            certified=to_bool(data.get("certified", False)),
            total_regular_hours=_to_float(data.get("totalRegularHours")),
            total_overtime_hours=_to_float(data.get("totalOvertimeHours")),
            total_double_time_hours=_to_float(data.get("totalDoubleTimeHours")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "userId": self.user_id,
            "weekStartDate": format_date(self.week_start_date) if self.week_start_date else None,
            "status": self.status.value,
            "certified": self.certified,
            "days": {name: entry.to_dict() for name, entry in self.iter_days()},
            "totalRegularHours": self.total_regular_hours,
            "totalOvertimeHours": self.total_overtime_hours,
            "totalDoubleTimeHours": self.total_double_time_hours,
        }


@dataclass(frozen=True)
class DayHours:
    regular: float = 0.0
    overtime: float = 0.0
    double_time: float = 0.0
    total_worked: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return {
            "regular": self.regular,
            "overtime": self.overtime,
            "doubleTime": self.double_time,
            "totalWorked": self.total_worked,
        }


@dataclass(frozen=True)
class WeeklyTotals:
    regular: float = 0.0
    overtime: float = 0.0
    double_time: float = 0.0
    total: float = 0.0
    days_worked: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "regular": self.regular,
            "overtime": self.overtime,
            "doubleTime": self.double_time,
            "total": self.total,
            "daysWorked": self.days_worked,
        }


@dataclass(frozen=True)
class DayContext:
    """Transient per-day state produced by the consecutive-day tracker."""

    day_name: str
    streak: int
    is_weekend: bool
    is_seventh_consecutive_day: bool


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "errors": list(self.errors)}


def to_bool(value: Any) -> bool:
    """JSON flags sometimes arrive as strings; "false", "0" and "" are false."""
    if isinstance(value, str):
        return value.strip().lower() not in ("", "false", "0", "no", "off")
    return bool(value)


def _to_int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def _to_float(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0
