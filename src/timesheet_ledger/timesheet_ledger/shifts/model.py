from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Any, Mapping

from ..common.datetime_utils import parse_hhmm
from ..common.validators import require_non_empty, require_non_negative
from ..core.constants import DEFAULT_GRACE_MINUTES
from ..core.enums import ShiftType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ShiftPolicy:
    """Thực thể miền (domain): Ca làm việc và thời gian ân hạn đi muộn."""

    shift_id: ShiftType
    shift_name: str
    start_time: time
    end_time: time
    grace_minutes: int = 0

    @classmethod
    def from_config(cls, raw: Mapping[str, Any]) -> "ShiftPolicy":
        """Build a policy from a settings entry with HH:mm strings."""
        try:
            shift_id = ShiftType(str(raw["id"]))
        except (KeyError, ValueError):
            raise ValidationError(f"Mã ca không hợp lệ: {raw.get('id')!r}")

        return cls(
            shift_id=shift_id,
            shift_name=require_non_empty(str(raw.get("name") or ""), "Tên ca"),
            start_time=parse_hhmm(str(raw.get("start_time") or "")),
            end_time=parse_hhmm(str(raw.get("end_time") or "")),
            grace_minutes=require_non_negative(raw.get("grace_minutes", DEFAULT_GRACE_MINUTES), "Số phút ân hạn"),
        )

    def describe(self) -> str:
        return f"{self.shift_name} ({self.start_time:%H:%M} - {self.end_time:%H:%M})"


@dataclass(frozen=True)
class QuotaPolicy:
    """Hạn mức về sớm: số phút tối đa mỗi lần và số lần tối đa mỗi tháng."""

    friday_early_minutes: int
    incident_cap_minutes: int
    monthly_incident_cap: int
