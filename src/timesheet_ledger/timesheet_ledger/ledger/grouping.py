from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..common.datetime_utils import iter_days
from ..punches.model import RawTimestamp

DateLike = Union[date, datetime]


@dataclass(frozen=True)
class DayBucket:
    day: date
    punches: Tuple[datetime, ...] = ()


def _as_date(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


def group_by_day(punches: Iterable[RawTimestamp]) -> Dict[date, List[datetime]]:
    grouped: Dict[date, List[datetime]] = defaultdict(list)
    for p in punches:
        grouped[p.timestamp.date()].append(p.timestamp)
    return dict(grouped)


def resolve_window(
    days_with_data: Iterable[date],
    *,
    start: Optional[DateLike] = None,
    end: Optional[DateLike] = None,
) -> Optional[Tuple[date, date]]:
    """Reporting window: explicit bounds first, then the data, else nothing."""
    known = sorted(days_with_data)

    if start is not None:
        first = _as_date(start)
    elif known:
        first = known[0]
    else:
        return None

    if end is not None:
        last = _as_date(end)
    elif known:
        last = known[-1]
    else:
        last = first

    if first > last:
        return None
    return first, last


def build_day_buckets(
    punches: Iterable[RawTimestamp],
    *,
    start: Optional[DateLike] = None,
    end: Optional[DateLike] = None,
) -> List[DayBucket]:
    """One bucket per calendar day of the window, including empty days."""
    grouped = group_by_day(punches)
    window = resolve_window(grouped.keys(), start=start, end=end)
    if window is None:
        return []

    first, last = window
    return [DayBucket(day=d, punches=tuple(sorted(grouped.get(d, ())))) for d in iter_days(first, last)]
