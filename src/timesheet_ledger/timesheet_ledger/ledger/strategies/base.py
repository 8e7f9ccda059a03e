from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Sequence, Tuple

from ...core.enums import DayStatus


@dataclass(frozen=True)
class PunchResolution:
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    status: Tuple[DayStatus, ...] = ()
    notes: Tuple[str, ...] = ()


class PunchStrategy(ABC):
    """Strategy Pattern: decide which punches of a day are check-in/check-out."""

    @abstractmethod
    def resolve(self, *, day: date, punches: Sequence[datetime]) -> PunchResolution:
        raise NotImplementedError
