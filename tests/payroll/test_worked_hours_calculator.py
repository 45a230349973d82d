from timesheet_engine.payroll.calculator.standard_calculator import StandardWorkedHoursCalculator
from timesheet_engine.timesheets.model import DayEntry

from conftest import standard_day


def test_standard_calculator_subtracts_meal_only_when_rest_breaks_are_paid():
    calc = StandardWorkedHoursCalculator()
    assert calc.worked_hours(standard_day()) == 8.0


def test_standard_calculator_subtracts_long_rest_break():
    calc = StandardWorkedHoursCalculator()
    assert calc.worked_hours(standard_day(pm_break_end="15:15")) == 7.75


def test_standard_calculator_never_negative():
    entry = DayEntry(time_in="08:00", time_out="08:30", meal_break_start="08:00", meal_break_end="09:00")
    assert StandardWorkedHoursCalculator().worked_hours(entry) == 0.0


def test_did_not_work_is_zero_even_with_times():
    entry = DayEntry(did_not_work=True, time_in="08:00", time_out="17:00")
    assert StandardWorkedHoursCalculator().worked_hours(entry) == 0.0


def test_out_of_town_time_is_not_added():
    entry = DayEntry(time_in="08:00", time_out="12:00", out_of_town_hours=3, out_of_town_minutes=30)
    assert StandardWorkedHoursCalculator().worked_hours(entry) == 4.0


def test_overnight_shift():
    entry = DayEntry(time_in="22:00", time_out="06:30", meal_break_start="02:00", meal_break_end="02:30")
    assert StandardWorkedHoursCalculator().worked_hours(entry) == 8.0
