"""
GPX adapter.

Turns a document parsed by gpxpy into the path model. Only the shape of
the data is handled here; GPX itself is gpxpy's job.
"""

import logging
from typing import List

import gpxpy
import gpxpy.gpx

from .models import Point, Route, Track, TrackSegment
from .normalize import iso_date, to_elevation, to_optional_float

logger = logging.getLogger(__name__)


def parse_gpx(content: bytes) -> gpxpy.gpx.GPX:
    """
    Parse GPX content.

    Raises:
        ValueError: If GPX is invalid
    """
    try:
        return gpxpy.parse(content.decode('utf-8'))
    except Exception as e:
        logger.error(f"Failed to parse GPX: {e}")
        raise ValueError(f"Invalid GPX file: {e}")


def _point(gpx_point) -> Point:
    return Point(
        latitude=gpx_point.latitude,
        longitude=gpx_point.longitude,
        elevation=to_elevation(gpx_point.elevation),
        timestamp=iso_date(gpx_point.time),
        hdop=to_optional_float(getattr(gpx_point, "horizontal_dilution", None)),
    )


def waypoints_from_gpx(gpx: gpxpy.gpx.GPX) -> List[Point]:
    return [_point(w) for w in gpx.waypoints]


def routes_from_gpx(gpx: gpxpy.gpx.GPX) -> List[Route]:
    return [
        Route(name=route.name, points=[_point(p) for p in route.points])
        for route in gpx.routes
    ]


def tracks_from_gpx(gpx: gpxpy.gpx.GPX) -> List[Track]:
    return [
        Track(
            name=track.name,
            segments=[
                TrackSegment(points=[_point(p) for p in segment.points])
                for segment in track.segments
            ],
        )
        for track in gpx.tracks
    ]
