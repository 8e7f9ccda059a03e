from __future__ import annotations

from typing import Iterable

from ..core.enums import DayStatus
from .model import AnalysisSummary, DailyRecord


def summarize(records: Iterable[DailyRecord]) -> AnalysisSummary:
    """Count LATE / EARLY_* / ABSENT tags over a finished ledger."""
    records = list(records)

    def count(status: DayStatus) -> int:
        return sum(1 for r in records if r.has(status))

    return AnalysisSummary(
        total_late=count(DayStatus.LATE),
        total_early_allowed=count(DayStatus.EARLY_ALLOWED),
        total_early_violation=count(DayStatus.EARLY_VIOLATION),
        total_absent=count(DayStatus.ABSENT),
    )
