from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Optional, Tuple

from ..common.datetime_utils import month_key
from ..core.enums import DayStatus, EarlyLeaveReason


@dataclass(frozen=True)
class DailyRecord:
    """Kết quả phân loại chấm công của một ngày trong kỳ báo cáo."""

    date: date
    check_in: Optional[datetime]
    check_out: Optional[datetime]
    day_of_week: int  # 0 = Sunday ... 6 = Saturday
    is_friday: bool
    status: Tuple[DayStatus, ...] = ()
    late_minutes: int = 0
    early_minutes: int = 0
    notes: Tuple[str, ...] = ()
    early_violation_reason: Optional[EarlyLeaveReason] = None

    def has(self, status: DayStatus) -> bool:
        return status in self.status


@dataclass(frozen=True)
class AnalysisSummary:
    total_late: int = 0
    total_early_allowed: int = 0
    total_early_violation: int = 0
    total_absent: int = 0


@dataclass
class MonthlyQuotaLedger:
    """Early-leave allowances granted so far, keyed by ``YYYY-MM``.

    Owned by a single engine call and only advanced while days are walked in
    ascending order.
    """

    used: Dict[str, int] = field(default_factory=dict)

    def used_in(self, day: date) -> int:
        return self.used.get(month_key(day), 0)

    def grant(self, day: date) -> int:
        key = month_key(day)
        self.used[key] = self.used.get(key, 0) + 1
        return self.used[key]
