"""
Path data model.

Points, routes, track segments and tracks as consumed by the summarizer.
Everything here is plain dataclasses; persistence lives elsewhere.

Fields the summarizer writes:
- Point.distance_km, Point.speed_kmh, Point.bearing (per-point detail only)
- Route.summary, TrackSegment.summary, Track.summary
- RouteCollection / TrackCollection bounds, start_time, end_time
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from trip.shared.bounds import Bounds


@dataclass
class Point:
    """A single geographic point of a route or track segment."""
    latitude: float
    longitude: float
    elevation: Optional[float] = None
    timestamp: Optional[datetime] = None
    hdop: Optional[float] = None

    # Computed from the previous point
    distance_km: Optional[float] = None
    speed_kmh: Optional[float] = None
    bearing: Optional[float] = None

    @property
    def coordinates(self) -> tuple[float, float]:
        """(lng, lat) order, as used by bounds."""
        return (self.longitude, self.latitude)


@dataclass(frozen=True)
class Summary:
    """
    Distance, elevation, extent and speed figures for a path.

    Elevation figures stay None when no point carries an elevation.
    Bounds are only computed when per-point detail is requested.
    """
    distance_km: float = 0.0
    ascent_m: Optional[float] = None
    descent_m: Optional[float] = None
    lowest_m: Optional[float] = None
    highest_m: Optional[float] = None
    bounds: Optional[Bounds] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    min_speed_kmh: Optional[float] = None
    max_speed_kmh: Optional[float] = None
    avg_speed_kmh: Optional[float] = None


@dataclass
class Route:
    """A planned route: one contiguous line of points."""
    points: List[Point] = field(default_factory=list)
    name: Optional[str] = None
    summary: Optional[Summary] = None


@dataclass
class TrackSegment:
    """One contiguous part of a recorded track."""
    points: List[Point] = field(default_factory=list)
    summary: Optional[Summary] = None


@dataclass
class Track:
    """A recorded track made of one or more segments."""
    segments: List[TrackSegment] = field(default_factory=list)
    name: Optional[str] = None
    summary: Optional[Summary] = None

    @property
    def points(self) -> List[Point]:
        """All segment points joined in order."""
        return [p for segment in self.segments for p in segment.points]


@dataclass
class RouteCollection:
    """Routes summarized together, with their merged extent."""
    routes: List[Route] = field(default_factory=list)
    bounds: Optional[Bounds] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None


@dataclass
class TrackCollection:
    """Tracks summarized together, with their merged extent."""
    tracks: List[Track] = field(default_factory=list)
    bounds: Optional[Bounds] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
