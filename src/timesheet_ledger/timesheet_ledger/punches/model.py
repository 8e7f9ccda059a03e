from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RawTimestamp:
    """Một lần chấm công trích ra từ log, kèm chuỗi gốc."""

    timestamp: datetime
    raw_string: str
