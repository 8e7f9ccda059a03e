"""Best-effort extraction of punch timestamps from exported terminal logs.

Terminals export ``d/m/yyyy h:mm:ss AM`` or ``m/d/yyyy ...`` depending on the
device locale, sometimes with Vietnamese meridiem markers (``SA`` = sáng,
``CH`` = chiều). One batch is assumed to come from one device, so the day/month
order is decided once for the whole input.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from ..core.constants import TWO_DIGIT_YEAR_CUTOFF
from ..core.enums import DateOrder
from .model import RawTimestamp

logger = logging.getLogger(__name__)

DATETIME_PATTERN = re.compile(
    r"(\d{1,2})/(\d{1,2})/(\d{2,4})\s+(\d{1,2}):(\d{2}):(\d{2})\s*(AM|PM|SA|CH)",
    re.IGNORECASE,
)

MERIDIEM_ALIASES = {"SA": "AM", "CH": "PM"}


def detect_date_order(matches: Iterable[re.Match], *, default: DateOrder = DateOrder.MONTH_FIRST) -> DateOrder:
    """First match with a component above 12 decides the order for the batch."""
    for m in matches:
        first, second = int(m.group(1)), int(m.group(2))
        if first > 12:
            return DateOrder.DAY_FIRST
        if second > 12:
            return DateOrder.MONTH_FIRST
    return default


def normalize_meridiem(token: str) -> str:
    upper = token.upper()
    return MERIDIEM_ALIASES.get(upper, upper)


def normalize_year(year_part: str, *, cutoff: int = TWO_DIGIT_YEAR_CUTOFF) -> int:
    year = int(year_part)
    if len(year_part) == 2:
        return 2000 + year if year < cutoff else 1900 + year
    return year


def to_24_hour(hour: int, meridiem: str) -> int:
    """Some terminals print a 24-hour clock and still append PM
    (``18:10:00 PM``); hours 13-23 are accepted only with PM."""
    if meridiem == "AM":
        if hour == 12:
            return 0
        if 1 <= hour <= 11:
            return hour
    else:
        if hour == 12 or 13 <= hour <= 23:
            return hour
        if 1 <= hour <= 11:
            return hour + 12
    raise ValueError(f"hour {hour} does not match meridiem {meridiem}")


@dataclass
class PunchExtractor:
    """Turns free-form log text into chronologically sorted punches."""

    year_cutoff: int = TWO_DIGIT_YEAR_CUTOFF
    default_order: DateOrder = DateOrder.MONTH_FIRST

    def extract(self, text: str) -> List[RawTimestamp]:
        matches = list(DATETIME_PATTERN.finditer(text or ""))
        if not matches:
            return []

        order = detect_date_order(matches, default=self.default_order)
        logger.debug("Found %d datetime candidates, using %s", len(matches), order.value)

        punches: List[RawTimestamp] = []
        for m in matches:
            parsed = self._parse(m, order)
            if parsed is None:
                logger.debug("Skipping invalid datetime %r", m.group(0))
                continue
            punches.append(RawTimestamp(timestamp=parsed, raw_string=m.group(0)))

        # sorted() is stable: equal instants keep their input order.
        return sorted(punches, key=lambda p: p.timestamp)

    def _parse(self, m: re.Match, order: DateOrder) -> Optional[datetime]:
        p1, p2, year_part, hour, minute, second, meridiem_raw = m.groups()
        if order is DateOrder.DAY_FIRST:
            day, month = int(p1), int(p2)
        else:
            month, day = int(p1), int(p2)

        try:
            return datetime(
                normalize_year(year_part, cutoff=self.year_cutoff),
                month,
                day,
                to_24_hour(int(hour), normalize_meridiem(meridiem_raw)),
                int(minute),
                int(second),
            )
        except ValueError:
            return None


def extract_timestamps(text: str) -> Sequence[RawTimestamp]:
    """Module-level shortcut using the default extractor settings."""
    return PunchExtractor().extract(text)
