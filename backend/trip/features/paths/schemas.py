"""
Path-related schemas.

Pydantic models for summary requests and responses. Incoming points are
accepted as loose dicts in either external schema and normalized by
trip.features.paths.normalize.
"""

import math
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from trip.shared.bounds import bounds_center, bounds_range

from .models import Point, Route, RouteCollection, Summary, Track, TrackCollection, TrackSegment


def _finite(value: Optional[float]) -> Optional[float]:
    """JSON has no NaN; report it as missing."""
    if value is None or not math.isfinite(value):
        return None
    return value


# =============================================================================
# Requests
# =============================================================================

class PathSummaryRequest(BaseModel):
    """Summarize a single path."""
    points: List[Dict[str, Any]]
    per_point_detail: bool = False


class RoutesSummaryRequest(BaseModel):
    """Summarize several routes: [{'name': ..., 'points': [...]}]."""
    routes: List[Dict[str, Any]]
    per_point_detail: bool = False


class TracksSummaryRequest(BaseModel):
    """Summarize several tracks: [{'name': ..., 'segments': [{'points': [...]}]}]."""
    tracks: List[Dict[str, Any]]
    calc_segments: bool = False
    per_point_detail: bool = False


# =============================================================================
# Responses
# =============================================================================

class PointSchema(BaseModel):
    """Point as returned to callers."""
    lat: Optional[float]
    lng: Optional[float]
    ele: Optional[float] = None
    time: Optional[datetime] = None
    hdop: Optional[float] = None
    distance: Optional[float] = Field(None, description="km from the previous point")
    speed: Optional[float] = Field(None, description="km/h from the previous point")
    bearing: Optional[float] = Field(None, description="Degrees from the previous point")

    @classmethod
    def from_point(cls, point: Point) -> "PointSchema":
        return cls(
            lat=_finite(point.latitude),
            lng=_finite(point.longitude),
            ele=point.elevation,
            time=point.timestamp,
            hdop=point.hdop,
            distance=_finite(point.distance_km),
            speed=_finite(point.speed_kmh),
            bearing=_finite(point.bearing),
        )


class SummarySchema(BaseModel):
    """Computed figures for a path, track or route."""
    distance_km: Optional[float] = None
    ascent_m: Optional[float] = None
    descent_m: Optional[float] = None
    lowest_m: Optional[float] = None
    highest_m: Optional[float] = None
    bounds: Optional[List[float]] = Field(None, description="[minLng, minLat, maxLng, maxLat]")
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    min_speed_kmh: Optional[float] = None
    max_speed_kmh: Optional[float] = None
    avg_speed_kmh: Optional[float] = None

    @classmethod
    def from_summary(cls, summary: Optional[Summary]) -> Optional["SummarySchema"]:
        if summary is None:
            return None
        return cls(
            distance_km=_finite(summary.distance_km),
            ascent_m=summary.ascent_m,
            descent_m=summary.descent_m,
            lowest_m=summary.lowest_m,
            highest_m=summary.highest_m,
            bounds=list(summary.bounds) if summary.bounds else None,
            start_time=summary.start_time,
            end_time=summary.end_time,
            min_speed_kmh=summary.min_speed_kmh,
            max_speed_kmh=summary.max_speed_kmh,
            avg_speed_kmh=summary.avg_speed_kmh,
        )


def _points(points: List[Point], include: bool) -> Optional[List[PointSchema]]:
    return [PointSchema.from_point(p) for p in points] if include else None


class PathSummaryResponse(BaseModel):
    summary: SummarySchema
    points: Optional[List[PointSchema]] = None


class RouteSummarySchema(BaseModel):
    name: Optional[str] = None
    summary: Optional[SummarySchema] = None
    points: Optional[List[PointSchema]] = None

    @classmethod
    def from_route(cls, route: Route, include_points: bool = False) -> "RouteSummarySchema":
        return cls(
            name=route.name,
            summary=SummarySchema.from_summary(route.summary),
            points=_points(route.points, include_points),
        )


class SegmentSummarySchema(BaseModel):
    summary: Optional[SummarySchema] = None
    points: Optional[List[PointSchema]] = None

    @classmethod
    def from_segment(cls, segment: TrackSegment, include_points: bool = False) -> "SegmentSummarySchema":
        return cls(
            summary=SummarySchema.from_summary(segment.summary),
            points=_points(segment.points, include_points),
        )


class TrackSummarySchema(BaseModel):
    name: Optional[str] = None
    summary: Optional[SummarySchema] = None
    segments: List[SegmentSummarySchema] = []

    @classmethod
    def from_track(cls, track: Track, include_points: bool = False) -> "TrackSummarySchema":
        return cls(
            name=track.name,
            summary=SummarySchema.from_summary(track.summary),
            segments=[
                SegmentSummarySchema.from_segment(s, include_points)
                for s in track.segments
            ],
        )


class CollectionExtent(BaseModel):
    """Merged bounds and time span of a collection."""
    bounds: Optional[List[float]] = None
    range_km: Optional[float] = Field(None, description="Distance between the bounds corners")
    center: Optional[List[float]] = Field(None, description="[lng, lat] midpoint of the bounds")
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    @staticmethod
    def extent_of(collection: Union[RouteCollection, TrackCollection]) -> Dict[str, Any]:
        """Extent fields for a summarized route or track collection."""
        center = bounds_center(collection.bounds)
        return {
            "bounds": list(collection.bounds) if collection.bounds else None,
            "range_km": bounds_range(collection.bounds),
            "center": list(center) if center else None,
            "start_time": collection.start_time,
            "end_time": collection.end_time,
        }


class RoutesSummaryResponse(CollectionExtent):
    routes: List[RouteSummarySchema]


class TracksSummaryResponse(CollectionExtent):
    tracks: List[TrackSummarySchema]
