"""
Time span helpers.

A time span is the earliest start and latest end of whatever carries
timestamps. Either end may be missing.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Optional


@dataclass(frozen=True)
class TimeSpan:
    """Earliest and latest moment of a set of objects."""
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None


def _earliest(a: Optional[datetime], b: Optional[datetime]) -> Optional[datetime]:
    if a is None:
        return b
    if b is None:
        return a
    return min(a, b)


def _latest(a: Optional[datetime], b: Optional[datetime]) -> Optional[datetime]:
    if a is None:
        return b
    if b is None:
        return a
    return max(a, b)


def time_span_of(timestamps: Iterable[Optional[datetime]]) -> TimeSpan:
    """Min and max of the timestamps that are present."""
    start = end = None
    for ts in timestamps:
        start = _earliest(start, ts)
        end = _latest(end, ts)
    return TimeSpan(start_time=start, end_time=end)


def merge_time_spans(items: Iterable[Any]) -> TimeSpan:
    """
    Merge objects exposing optional `start_time` / `end_time` attributes.

    Objects may carry only one of the two; None items are skipped.
    """
    start = end = None
    for item in items:
        if item is None:
            continue
        start = _earliest(start, getattr(item, "start_time", None))
        end = _latest(end, getattr(item, "end_time", None))
    return TimeSpan(start_time=start, end_time=end)
