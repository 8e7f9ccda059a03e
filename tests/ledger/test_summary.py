from datetime import date

from src.timesheet_ledger.timesheet_ledger.core.enums import DayStatus
from src.timesheet_ledger.timesheet_ledger.ledger.model import AnalysisSummary, DailyRecord
from src.timesheet_ledger.timesheet_ledger.ledger.summary import summarize


def _record(day: date, *status: DayStatus) -> DailyRecord:
    return DailyRecord(date=day, check_in=None, check_out=None, day_of_week=1, is_friday=False, status=status)


def test_summary_counts_tags_across_days():
    records = [
        _record(date(2024, 1, 15), DayStatus.LATE, DayStatus.EARLY_VIOLATION),
        _record(date(2024, 1, 16), DayStatus.LATE),
        _record(date(2024, 1, 17), DayStatus.EARLY_ALLOWED),
        _record(date(2024, 1, 18), DayStatus.ABSENT),
        _record(date(2024, 1, 20), DayStatus.WEEKEND),
        _record(date(2024, 1, 22), DayStatus.MISSING_OUT),
    ]

    assert summarize(records) == AnalysisSummary(
        total_late=2,
        total_early_allowed=1,
        total_early_violation=1,
        total_absent=1,
    )


def test_summary_of_nothing_is_zero():
    assert summarize([]) == AnalysisSummary()


def test_summary_accepts_generators():
    summary = summarize(_record(date(2024, 1, d), DayStatus.ABSENT) for d in (15, 16))

    assert summary.total_absent == 2
