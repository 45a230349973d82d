from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from .core import constants
from .payroll.calculator.standard_calculator import StandardWorkedHoursCalculator
from .payroll.classifier import DailyClassifier
from .payroll.factory import ClassificationStrategyFactory
from .payroll.service import TimesheetCalculationService
from .timesheets.service import DayDefaults, TimesheetService


@dataclass(frozen=True)
class Container:
    calculator: StandardWorkedHoursCalculator
    strategy_factory: ClassificationStrategyFactory

    calculation_service: TimesheetCalculationService
    timesheet_service: TimesheetService


def _day_defaults(settings: Optional[ModuleType]) -> DayDefaults:
    def setting(name: str) -> str:
        return str(getattr(settings, name, getattr(constants, name)))

    return DayDefaults(
        time_in=setting("DEFAULT_TIME_IN"),
        time_out=setting("DEFAULT_TIME_OUT"),
        meal_break_start=setting("DEFAULT_MEAL_BREAK_START"),
        meal_break_end=setting("DEFAULT_MEAL_BREAK_END"),
        am_break_start=setting("DEFAULT_AM_BREAK_START"),
        am_break_end=setting("DEFAULT_AM_BREAK_END"),
        pm_break_start=setting("DEFAULT_PM_BREAK_START"),
        pm_break_end=setting("DEFAULT_PM_BREAK_END"),
    )


def build_container(*, settings: Optional[ModuleType] = None) -> Container:
    calculator = StandardWorkedHoursCalculator()
    strategy_factory = ClassificationStrategyFactory()

    calculation_service = TimesheetCalculationService(
        classifier=DailyClassifier(calculator=calculator, strategy_factory=strategy_factory),
    )
    timesheet_service = TimesheetService(calculation_service, defaults=_day_defaults(settings))

    return Container(
        calculator=calculator,
        strategy_factory=strategy_factory,
        calculation_service=calculation_service,
        timesheet_service=timesheet_service,
    )
