"""Daily classification engine.

Days are classified strictly in ascending date order: the early-leave quota is
first come, first served within a month, so reordering days would change which
incidents are allowed.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional

from ..common.datetime_utils import at_time, js_weekday, whole_minutes
from ..core.enums import DayStatus, EarlyLeaveReason
from ..punches.model import RawTimestamp
from ..shifts.model import QuotaPolicy, ShiftPolicy
from .factory import PunchStrategyFactory
from .grouping import DateLike, DayBucket, build_day_buckets
from .model import DailyRecord, MonthlyQuotaLedger


def _hours_label(minutes: int) -> str:
    return f"{minutes / 60:g}h"


class LedgerEngine:
    def __init__(self, quota: QuotaPolicy, *, strategy_factory: Optional[PunchStrategyFactory] = None):
        self._quota = quota
        self._factory = strategy_factory or PunchStrategyFactory()

    def analyze(
        self,
        punches: Iterable[RawTimestamp],
        shift: ShiftPolicy,
        *,
        start: Optional[DateLike] = None,
        end: Optional[DateLike] = None,
    ) -> List[DailyRecord]:
        buckets = build_day_buckets(punches, start=start, end=end)
        ledger = MonthlyQuotaLedger()
        return [self.classify_day(b, shift, ledger) for b in buckets]

    def classify_day(self, bucket: DayBucket, shift: ShiftPolicy, ledger: MonthlyQuotaLedger) -> DailyRecord:
        day = bucket.day
        is_friday = day.weekday() == 4
        resolution = self._factory.for_bucket(bucket.punches).resolve(day=day, punches=bucket.punches)

        status = list(resolution.status)
        notes = list(resolution.notes)
        late_minutes = 0
        early_minutes = 0
        reason = None

        if bucket.punches:
            if resolution.check_in is not None:
                late = self._late_minutes(day, resolution.check_in, shift)
                if late is not None:
                    late_minutes = late
                    status.append(DayStatus.LATE)
                    notes.append(
                        f"Đi muộn {late_minutes} phút "
                        f"(Quy định: >{shift.start_time:%H:%M} + {shift.grace_minutes}p)"
                    )

            if resolution.check_out is not None:
                early_minutes, tag, reason, note = self._early_leave(day, is_friday, resolution.check_out, shift, ledger)
                if tag is not None:
                    status.append(tag)
                    notes.append(note)

        return DailyRecord(
            date=day,
            check_in=resolution.check_in,
            check_out=resolution.check_out,
            day_of_week=js_weekday(day),
            is_friday=is_friday,
            status=tuple(status),
            late_minutes=late_minutes,
            early_minutes=early_minutes,
            notes=tuple(notes),
            early_violation_reason=reason,
        )

    def _late_minutes(self, day: date, check_in: datetime, shift: ShiftPolicy) -> Optional[int]:
        expected_start = at_time(day, shift.start_time)
        threshold = expected_start + timedelta(minutes=shift.grace_minutes)
        if check_in > threshold:
            return whole_minutes(check_in, expected_start)
        return None

    def _early_leave(self, day: date, is_friday: bool, check_out: datetime, shift: ShiftPolicy, ledger: MonthlyQuotaLedger):
        expected_end = at_time(day, shift.end_time)
        suffix = ""
        if is_friday:
            expected_end -= timedelta(minutes=self._quota.friday_early_minutes)
            suffix = f" (Thứ 6 về sớm {_hours_label(self._quota.friday_early_minutes)})"

        if check_out >= expected_end:
            return 0, None, None, ""

        minutes = whole_minutes(expected_end, check_out)
        within_cap = minutes <= self._quota.incident_cap_minutes
        if within_cap and ledger.used_in(day) < self._quota.monthly_incident_cap:
            ledger.grant(day)
            return minutes, DayStatus.EARLY_ALLOWED, None, f"Về sớm {minutes} phút (Trong hạn mức){suffix}"

        if not within_cap:
            reason = EarlyLeaveReason.EXCEEDS_INCIDENT_CAP
            detail = f"Vượt quá {_hours_label(self._quota.incident_cap_minutes)}"
        else:
            reason = EarlyLeaveReason.MONTHLY_QUOTA_EXHAUSTED
            detail = "Hết quota tháng"
        return minutes, DayStatus.EARLY_VIOLATION, reason, f"Về sớm {minutes} phút ({detail}){suffix}"
