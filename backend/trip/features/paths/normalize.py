"""
Input normalization.

Point data arrives from two external schemas (uploaded GPX uses `ele`,
logged locations use `altitude`) with string or numeric values. Everything
is mapped onto one canonical Point here, so the summarizer never has to
branch on field names.

Leniency rules:
- Non-numeric coordinates become NaN (and propagate through distances)
- Non-numeric elevations and unparsable times become None
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from .models import Point, Route, Track, TrackSegment

logger = logging.getLogger(__name__)

LATITUDE_KEYS = ("lat", "latitude")
LONGITUDE_KEYS = ("lng", "lon", "longitude")
ELEVATION_KEYS = ("ele", "altitude", "elevation")
TIME_KEYS = ("time", "timestamp")


def _first_present(data: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    """Value of the first key that is set and not blank."""
    for key in keys:
        value = data.get(key)
        if value is not None and value != "":
            return value
    return None


def to_float(value: Any) -> float:
    """Coerce a coordinate to float, NaN if it is not numeric."""
    if value is None or isinstance(value, bool):
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def to_optional_float(value: Any) -> Optional[float]:
    """Coerce to a finite float, None if missing or not numeric."""
    if value is None or value == "":
        return None
    number = to_float(value)
    if not math.isfinite(number):
        return None
    return number


# Elevations follow the same rule as any other optional measurement
to_elevation = to_optional_float


def iso_date(value: Any) -> Optional[datetime]:
    """
    Parse a timestamp permissively.

    Accepts datetimes, epoch milliseconds and ISO-8601 strings
    (a trailing 'Z' included). Naive values are taken as UTC.

    Returns:
        Timezone-aware datetime, or None if the value cannot be parsed
    """
    if value is None or value == "" or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        try:
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            logger.debug(f"Ignoring unparsable time: {value!r}")
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def point_from_dict(data: Mapping[str, Any]) -> Point:
    """Build a canonical Point from either external point schema."""
    return Point(
        latitude=to_float(_first_present(data, LATITUDE_KEYS)),
        longitude=to_float(_first_present(data, LONGITUDE_KEYS)),
        elevation=to_elevation(_first_present(data, ELEVATION_KEYS)),
        timestamp=iso_date(_first_present(data, TIME_KEYS)),
        hdop=to_optional_float(data.get("hdop")),
    )


def route_from_dict(data: Mapping[str, Any]) -> Route:
    """Build a Route from {'name': ..., 'points': [...]}."""
    return Route(
        name=data.get("name"),
        points=[point_from_dict(p) for p in data.get("points") or []],
    )


def track_from_dict(data: Mapping[str, Any]) -> Track:
    """Build a Track from {'name': ..., 'segments': [{'points': [...]}, ...]}."""
    return Track(
        name=data.get("name"),
        segments=[
            TrackSegment(points=[point_from_dict(p) for p in segment.get("points") or []])
            for segment in data.get("segments") or []
        ],
    )
