from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence, Union

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty
from ..core.enums import DayStatus
from ..core.exceptions import ValidationError
from ..punches.extractor import PunchExtractor
from ..punches.model import RawTimestamp
from ..shifts.model import ShiftPolicy
from ..shifts.repository import ShiftRepository
from .engine import LedgerEngine
from .model import AnalysisSummary, DailyRecord
from .summary import summarize

logger = logging.getLogger(__name__)

WEEKDAY_LABELS = ["Chủ nhật", "Thứ 2", "Thứ 3", "Thứ 4", "Thứ 5", "Thứ 6", "Thứ 7"]

STATUS_LABELS = {
    DayStatus.LATE: "Đi muộn",
    DayStatus.EARLY_ALLOWED: "Về sớm (Trong hạn mức)",
    DayStatus.EARLY_VIOLATION: "Về sớm (Vi phạm)",
    DayStatus.ABSENT: "Vắng mặt",
    DayStatus.WEEKEND: "Cuối tuần",
    DayStatus.MISSING_IN: "Thiếu giờ vào",
    DayStatus.MISSING_OUT: "Thiếu giờ ra",
}

STATUS_CSS = {
    DayStatus.LATE: "bg-danger",
    DayStatus.EARLY_ALLOWED: "bg-info text-dark",
    DayStatus.EARLY_VIOLATION: "bg-warning text-dark",
    DayStatus.ABSENT: "bg-secondary",
    DayStatus.WEEKEND: "bg-light text-dark",
    DayStatus.MISSING_IN: "bg-warning text-dark",
    DayStatus.MISSING_OUT: "bg-warning text-dark",
}

NORMAL_LABEL = "Bình thường"

DateInput = Union[date, str, None]


@dataclass(frozen=True)
class LedgerReport:
    shift: ShiftPolicy
    punches: Sequence[RawTimestamp]
    records: Sequence[DailyRecord]
    summary: AnalysisSummary


class LedgerService:
    """Use case: paste a terminal log, get the classified monthly ledger."""

    def __init__(
        self,
        shifts: ShiftRepository,
        engine: LedgerEngine,
        *,
        extractor: Optional[PunchExtractor] = None,
        default_shift_id: Optional[str] = None,
    ):
        self._shifts = shifts
        self._engine = engine
        self._extractor = extractor or PunchExtractor()
        self._default_shift_id = default_shift_id

    @staticmethod
    def _parse_date(value: DateInput, field_name: str) -> Optional[date]:
        if value is None or isinstance(value, date):
            return value
        v = str(value).strip()
        if not v:
            return None
        try:
            return parse_iso_date(v)
        except ValueError:
            raise ValidationError(f"{field_name} không hợp lệ (YYYY-MM-DD)")

    def list_shifts(self) -> List[ShiftPolicy]:
        return list(self._shifts.list_all())

    def get_shift(self, shift_id: Optional[str]) -> ShiftPolicy:
        shift_id = shift_id or self._default_shift_id
        if not shift_id:
            raise ValidationError("Vui lòng chọn ca làm việc")
        shift = self._shifts.get_by_id(shift_id)
        if not shift:
            raise ValidationError(f"Ca làm việc không tồn tại: {shift_id}")
        return shift

    def analyze_text(
        self,
        *,
        text: str,
        shift_id: Optional[str] = None,
        start: DateInput = None,
        end: DateInput = None,
    ) -> LedgerReport:
        text = require_non_empty(text, "Dữ liệu chấm công")
        shift = self.get_shift(shift_id)
        start_date = self._parse_date(start, "Ngày bắt đầu")
        end_date = self._parse_date(end, "Ngày kết thúc")

        punches = self._extractor.extract(text)
        records = self._engine.analyze(punches, shift, start=start_date, end=end_date)
        summary = summarize(records)

        logger.info(
            "Analyzed %d punches into %d days (shift=%s, late=%d, early_violation=%d, absent=%d)",
            len(punches),
            len(records),
            shift.shift_id.value,
            summary.total_late,
            summary.total_early_violation,
            summary.total_absent,
        )
        return LedgerReport(shift=shift, punches=punches, records=records, summary=summary)

    def get_rows_ui(self, report: LedgerReport) -> List[dict]:
        return [self._to_ui(r) for r in report.records]

    def _to_ui(self, r: DailyRecord) -> dict:
        labels = [STATUS_LABELS.get(s, s.value) for s in r.status] or [NORMAL_LABEL]
        css = STATUS_CSS.get(r.status[0], "bg-secondary") if r.status else "bg-success"

        return {
            "date": r.date.strftime("%Y-%m-%d"),
            "weekday": WEEKDAY_LABELS[r.day_of_week],
            "check_in": r.check_in.strftime("%H:%M:%S") if r.check_in else "-",
            "check_out": r.check_out.strftime("%H:%M:%S") if r.check_out else "-",
            "status": ", ".join(labels),
            "status_codes": [s.value for s in r.status],
            "late_minutes": r.late_minutes,
            "early_minutes": r.early_minutes,
            "note": "; ".join(r.notes),
            "css_class": css,
        }

    @staticmethod
    def summary_ui(summary: AnalysisSummary) -> dict:
        return {
            "total_late": summary.total_late,
            "total_early_allowed": summary.total_early_allowed,
            "total_early_violation": summary.total_early_violation,
            "total_absent": summary.total_absent,
        }
