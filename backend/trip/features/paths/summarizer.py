"""
Path Summarizer

Computes distance, ascent/descent, elevation extremes, bounds, time span
and speed figures for one ordered sequence of points.

Two entry points:
- summarize_path() → PathSummary (pure, returns enriched copies of the points)
- fill_path()      → Summary (writes onto the given Route/TrackSegment in place)
"""

import logging
import math
from dataclasses import dataclass, replace
from typing import List, Sequence, Union

from trip.shared.bounds import bounds_of_coordinates
from trip.shared.geo import haversine, initial_bearing, calculate_speed_kmh
from trip.shared.timespan import time_span_of

from .models import Point, Route, Summary, TrackSegment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathSummary:
    """Summary of a path together with the points it was computed from."""
    summary: Summary
    points: List[Point]


def _clear_detail(point: Point) -> None:
    point.distance_km = None
    point.speed_kmh = None
    point.bearing = None


def _accumulate(points: Sequence[Point], per_point_detail: bool) -> Summary:
    """
    Walk the points once, keeping running totals.

    When per_point_detail is set, distance/speed/bearing from the previous
    point are written onto each point.
    """
    distance_km = 0.0
    ascent_m = 0.0
    descent_m = 0.0
    lowest_m = None
    highest_m = None
    last_elevation = None

    min_speed = None
    max_speed = None
    timed_distance_km = 0.0
    timed_seconds = 0.0

    previous = None
    for point in points:
        if per_point_detail:
            _clear_detail(point)

        if previous is not None:
            leg_km = haversine(
                previous.latitude, previous.longitude,
                point.latitude, point.longitude
            )
            distance_km += leg_km

            if per_point_detail:
                point.distance_km = leg_km
                point.bearing = initial_bearing(
                    previous.latitude, previous.longitude,
                    point.latitude, point.longitude
                )
                if previous.timestamp is not None and point.timestamp is not None:
                    elapsed = (point.timestamp - previous.timestamp).total_seconds()
                    speed = calculate_speed_kmh(leg_km, elapsed)
                    if speed is not None and math.isfinite(speed):
                        point.speed_kmh = speed
                        min_speed = speed if min_speed is None else min(min_speed, speed)
                        max_speed = speed if max_speed is None else max(max_speed, speed)
                        timed_distance_km += leg_km
                        timed_seconds += elapsed

        # Points without elevation still count for distance and bounds
        elevation = point.elevation
        if elevation is not None and math.isfinite(elevation):
            if last_elevation is not None:
                delta = elevation - last_elevation
                if delta > 0:
                    ascent_m += delta
                elif delta < 0:
                    descent_m -= delta
            lowest_m = elevation if lowest_m is None else min(lowest_m, elevation)
            highest_m = elevation if highest_m is None else max(highest_m, elevation)
            last_elevation = elevation

        previous = point

    has_elevation = last_elevation is not None
    span = time_span_of(p.timestamp for p in points)

    return Summary(
        distance_km=distance_km,
        ascent_m=ascent_m if has_elevation else None,
        descent_m=descent_m if has_elevation else None,
        lowest_m=lowest_m,
        highest_m=highest_m,
        bounds=bounds_of_coordinates(p.coordinates for p in points) if per_point_detail else None,
        start_time=span.start_time,
        end_time=span.end_time,
        min_speed_kmh=min_speed,
        max_speed_kmh=max_speed,
        avg_speed_kmh=(
            timed_distance_km / (timed_seconds / 3600) if timed_seconds > 0 else None
        ),
    )


def summarize_path(
    points: Sequence[Point],
    per_point_detail: bool = False
) -> PathSummary:
    """
    Summarize one path without touching the input points.

    Args:
        points: Points in path order
        per_point_detail: Also compute bounds and per-point
            distance/speed/bearing (on copies of the points)

    Returns:
        PathSummary with the summary and the (possibly enriched) points
    """
    if per_point_detail:
        working = [replace(p) for p in points]
    else:
        working = list(points)

    summary = _accumulate(working, per_point_detail)
    return PathSummary(summary=summary, points=working)


def fill_path(
    path: Union[Route, TrackSegment],
    per_point_detail: bool = False
) -> Summary:
    """
    Summarize a route or segment in place.

    Sets path.summary and, with per_point_detail, overwrites distance_km,
    speed_kmh and bearing on every point of the path.
    """
    path.summary = _accumulate(path.points, per_point_detail)
    return path.summary
