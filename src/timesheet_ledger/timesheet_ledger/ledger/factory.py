from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from .strategies.base import PunchStrategy
from .strategies.full_day_strategy import FullDayStrategy
from .strategies.no_data_strategy import NoDataStrategy
from .strategies.single_punch_strategy import SinglePunchStrategy


@dataclass
class PunchStrategyFactory:
    """Factory Pattern: choose the punch resolution strategy by bucket size."""

    def for_bucket(self, punches: Sequence[datetime]) -> PunchStrategy:
        if not punches:
            return NoDataStrategy()
        if len(punches) == 1:
            return SinglePunchStrategy()
        return FullDayStrategy()
