"""
Bounding box helpers.

Bounds are (min_lng, min_lat, max_lng, max_lat) tuples. Merging tolerates
boxes whose min/max were returned swapped by other geometry code.
"""
import math
from typing import Iterable, Optional, Sequence

from .geo import haversine

Bounds = tuple[float, float, float, float]


def _is_empty(bounds: Optional[Sequence[Optional[float]]]) -> bool:
    return (
        not bounds
        or len(bounds) != 4
        or any(v is None for v in bounds)
    )


def bounds_of_coordinates(coordinates: Iterable[tuple[float, float]]) -> Optional[Bounds]:
    """
    Minimal box enclosing (lng, lat) pairs.

    Non-finite pairs are ignored. A single pair gives a zero-area box,
    no usable pairs give None.
    """
    min_lng = min_lat = math.inf
    max_lng = max_lat = -math.inf
    found = False

    for lng, lat in coordinates:
        if not (math.isfinite(lng) and math.isfinite(lat)):
            continue
        found = True
        min_lng = min(min_lng, lng)
        min_lat = min(min_lat, lat)
        max_lng = max(max_lng, lng)
        max_lat = max(max_lat, lat)

    if not found:
        return None
    return (min_lng, min_lat, max_lng, max_lat)


def normalize_bounds(bounds: Sequence[float]) -> Bounds:
    """Order both axes so that the minimum comes first."""
    x1, y1, x2, y2 = bounds
    return (min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))


def merge_bounds(bounds_list: Iterable[Optional[Sequence[float]]]) -> Optional[Bounds]:
    """
    Union of several bounding boxes.

    None or empty entries are skipped; if nothing is left the result is None.
    """
    merged: Optional[Bounds] = None

    for bounds in bounds_list:
        if _is_empty(bounds):
            continue
        min_lng, min_lat, max_lng, max_lat = normalize_bounds(bounds)
        if merged is None:
            merged = (min_lng, min_lat, max_lng, max_lat)
        else:
            merged = (
                min(merged[0], min_lng),
                min(merged[1], min_lat),
                max(merged[2], max_lng),
                max(merged[3], max_lat),
            )

    return merged


def bounds_range(bounds: Optional[Sequence[float]]) -> Optional[float]:
    """
    Great-circle distance between the two corners of a box.

    Returns:
        Distance in kilometers, or None for empty bounds
    """
    if _is_empty(bounds):
        return None
    lng1, lat1, lng2, lat2 = bounds
    return haversine(lat1, lng1, lat2, lng2)


def bounds_center(bounds: Optional[Sequence[float]]) -> Optional[tuple[float, float]]:
    """Midpoint (lng, lat) of a box, or None for empty bounds."""
    if _is_empty(bounds):
        return None
    lng1, lat1, lng2, lat2 = bounds
    return ((lng1 + lng2) / 2, (lat1 + lat2) / 2)
