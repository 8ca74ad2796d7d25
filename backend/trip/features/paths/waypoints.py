"""
Waypoint extent.

Waypoints are unordered, so only their bounds and time span are of interest.
"""

from typing import Optional, Sequence

from trip.shared.bounds import Bounds, bounds_of_coordinates
from trip.shared.timespan import TimeSpan, time_span_of

from .models import Point


def waypoint_bounds(points: Sequence[Point]) -> Optional[Bounds]:
    """Box around the waypoints; degenerate for one, None for none."""
    return bounds_of_coordinates(p.coordinates for p in points)


def time_span_for_points(points: Sequence[Point]) -> TimeSpan:
    """Earliest and latest waypoint time, both None if no point has one."""
    return time_span_of(p.timestamp for p in points)
