from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

from ...common.datetime_utils import is_weekend
from ...core.enums import DayStatus
from .base import PunchResolution, PunchStrategy


class NoDataStrategy(PunchStrategy):
    """No punches at all: weekend or absent, nothing else applies."""

    def resolve(self, *, day: date, punches: Sequence[datetime]) -> PunchResolution:
        if is_weekend(day):
            return PunchResolution(status=(DayStatus.WEEKEND,))
        return PunchResolution(status=(DayStatus.ABSENT,), notes=("Không có dữ liệu chấm công",))
