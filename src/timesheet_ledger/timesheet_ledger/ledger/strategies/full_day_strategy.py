from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

from .base import PunchResolution, PunchStrategy


class FullDayStrategy(PunchStrategy):
    """Two or more punches: first is check-in, last is check-out."""

    def resolve(self, *, day: date, punches: Sequence[datetime]) -> PunchResolution:
        ordered = sorted(punches)
        return PunchResolution(check_in=ordered[0], check_out=ordered[-1])
