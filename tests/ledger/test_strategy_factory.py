from datetime import date, datetime

from src.timesheet_ledger.timesheet_ledger.core.enums import DayStatus
from src.timesheet_ledger.timesheet_ledger.ledger.factory import PunchStrategyFactory
from src.timesheet_ledger.timesheet_ledger.ledger.strategies.full_day_strategy import FullDayStrategy
from src.timesheet_ledger.timesheet_ledger.ledger.strategies.no_data_strategy import NoDataStrategy
from src.timesheet_ledger.timesheet_ledger.ledger.strategies.single_punch_strategy import SinglePunchStrategy


def test_factory_picks_strategy_by_bucket_size():
    factory = PunchStrategyFactory()

    assert isinstance(factory.for_bucket(()), NoDataStrategy)
    assert isinstance(factory.for_bucket((datetime(2025, 1, 1, 8, 0),)), SinglePunchStrategy)
    assert isinstance(factory.for_bucket((datetime(2025, 1, 1, 8, 0), datetime(2025, 1, 1, 17, 0))), FullDayStrategy)


def test_no_data_strategy_weekend_vs_absent():
    strategy = NoDataStrategy()

    assert strategy.resolve(day=date(2025, 1, 4), punches=()).status == (DayStatus.WEEKEND,)
    assert strategy.resolve(day=date(2025, 1, 5), punches=()).status == (DayStatus.WEEKEND,)
    assert strategy.resolve(day=date(2025, 1, 6), punches=()).status == (DayStatus.ABSENT,)


def test_single_punch_just_before_noon_is_check_in():
    day = date(2025, 1, 6)
    resolution = SinglePunchStrategy().resolve(day=day, punches=(datetime(2025, 1, 6, 11, 59, 59),))

    assert resolution.check_in == datetime(2025, 1, 6, 11, 59, 59)
    assert resolution.check_out is None
    assert resolution.status == (DayStatus.MISSING_OUT,)


def test_full_day_uses_first_and_last():
    punches = (datetime(2025, 1, 6, 12, 0), datetime(2025, 1, 6, 7, 58), datetime(2025, 1, 6, 18, 2))
    resolution = FullDayStrategy().resolve(day=date(2025, 1, 6), punches=punches)

    assert resolution.check_in == datetime(2025, 1, 6, 7, 58)
    assert resolution.check_out == datetime(2025, 1, 6, 18, 2)
    assert resolution.status == ()
