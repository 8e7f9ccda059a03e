from __future__ import annotations

from datetime import date, datetime, time
from typing import Sequence

from ...core.constants import SINGLE_PUNCH_NOON_HOUR
from ...core.enums import DayStatus
from .base import PunchResolution, PunchStrategy


class SinglePunchStrategy(PunchStrategy):
    """One punch: before noon it is a check-in, from noon on a check-out."""

    def __init__(self, noon: time = time(SINGLE_PUNCH_NOON_HOUR, 0)):
        self._noon = noon

    def resolve(self, *, day: date, punches: Sequence[datetime]) -> PunchResolution:
        punch = punches[0]
        if punch < datetime.combine(day, self._noon):
            return PunchResolution(
                check_in=punch,
                status=(DayStatus.MISSING_OUT,),
                notes=("Không có dữ liệu giờ ra",),
            )
        return PunchResolution(
            check_out=punch,
            status=(DayStatus.MISSING_IN,),
            notes=("Không có dữ liệu giờ vào",),
        )
