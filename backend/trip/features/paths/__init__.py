"""
Path geometry module.

Usage:
    from trip.features.paths import summarize_path, summarize_tracks
    from trip.features.paths import point_from_dict, track_from_dict

Components:
- Point, Route, TrackSegment, Track: path data model
- summarize_path / fill_path: single path summarizer (pure / in place)
- summarize_route(s), summarize_track(s): aggregation with merged extent
- point_from_dict, route_from_dict, track_from_dict: input normalization
- routes_from_gpx, tracks_from_gpx, waypoints_from_gpx: gpxpy adapter
"""

from .models import (
    Point,
    Route,
    RouteCollection,
    Summary,
    Track,
    TrackCollection,
    TrackSegment,
)
from .summarizer import PathSummary, summarize_path, fill_path
from .aggregator import (
    summarize_route,
    summarize_routes,
    summarize_track,
    summarize_tracks,
)
from .normalize import (
    iso_date,
    point_from_dict,
    route_from_dict,
    track_from_dict,
    to_elevation,
    to_float,
)
from .gpx import parse_gpx, routes_from_gpx, tracks_from_gpx, waypoints_from_gpx
from .waypoints import waypoint_bounds, time_span_for_points

__all__ = [
    # Model
    "Point",
    "Route",
    "RouteCollection",
    "Summary",
    "Track",
    "TrackCollection",
    "TrackSegment",
    # Summarizer
    "PathSummary",
    "summarize_path",
    "fill_path",
    # Aggregator
    "summarize_route",
    "summarize_routes",
    "summarize_track",
    "summarize_tracks",
    # Normalization
    "iso_date",
    "point_from_dict",
    "route_from_dict",
    "track_from_dict",
    "to_elevation",
    "to_float",
    # GPX
    "parse_gpx",
    "routes_from_gpx",
    "tracks_from_gpx",
    "waypoints_from_gpx",
    # Waypoints
    "waypoint_bounds",
    "time_span_for_points",
]
