from timesheet_engine.payroll.factory import ClassificationStrategyFactory
from timesheet_engine.payroll.strategies.seventh_day_strategy import SeventhDayStrategy
from timesheet_engine.payroll.strategies.weekday_strategy import WeekdayStrategy
from timesheet_engine.payroll.strategies.weekend_strategy import WeekendStrategy


def test_factory_weekday():
    strategy = ClassificationStrategyFactory().for_day(is_weekend=False, is_seventh_consecutive_day=False)
    assert isinstance(strategy, WeekdayStrategy)


def test_factory_weekend():
    strategy = ClassificationStrategyFactory().for_day(is_weekend=True, is_seventh_consecutive_day=False)
    assert isinstance(strategy, WeekendStrategy)


def test_factory_seventh_day_wins_over_weekend():
    strategy = ClassificationStrategyFactory().for_day(is_weekend=True, is_seventh_consecutive_day=True)
    assert isinstance(strategy, SeventhDayStrategy)


def test_weekday_split_boundaries():
    s = WeekdayStrategy()
    assert s.split(8).regular == 8 and s.split(8).overtime == 0
    assert (s.split(12).regular, s.split(12).overtime, s.split(12).double_time) == (8, 4, 0)
    split = s.split(13.5)
    assert (split.regular, split.overtime, split.double_time) == (8, 4, 1.5)


def test_seventh_day_split_boundaries():
    s = SeventhDayStrategy()
    assert (s.split(8).regular, s.split(8).overtime, s.split(8).double_time) == (0, 8, 0)
    assert (s.split(10).overtime, s.split(10).double_time) == (8, 2)
