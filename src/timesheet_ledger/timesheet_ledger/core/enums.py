from __future__ import annotations

from enum import Enum


class ShiftType(str, Enum):
    """Các ca làm việc chuẩn của công ty."""

    SHIFT_1 = "SHIFT_1"  # 8h -> 18h
    SHIFT_2 = "SHIFT_2"  # 8h30 -> 18h30
    SHIFT_3 = "SHIFT_3"  # 9h -> 19h


class DayStatus(str, Enum):
    """Trạng thái chấm công của một ngày (một ngày có thể mang nhiều trạng thái)."""

    LATE = "LATE"
    EARLY_ALLOWED = "EARLY_ALLOWED"
    EARLY_VIOLATION = "EARLY_VIOLATION"
    ABSENT = "ABSENT"
    WEEKEND = "WEEKEND"
    MISSING_IN = "MISSING_IN"
    MISSING_OUT = "MISSING_OUT"


class EarlyLeaveReason(str, Enum):
    """Lý do một lần về sớm bị tính là vi phạm."""

    EXCEEDS_INCIDENT_CAP = "EXCEEDS_INCIDENT_CAP"
    MONTHLY_QUOTA_EXHAUSTED = "MONTHLY_QUOTA_EXHAUSTED"


class DateOrder(str, Enum):
    """Thứ tự ngày/tháng trong log xuất từ máy chấm công."""

    MONTH_FIRST = "MM/dd/yyyy"
    DAY_FIRST = "dd/MM/yyyy"
