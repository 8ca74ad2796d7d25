"""
Track/Route Aggregator

Applies the path summarizer across nested structures and merges the
results upward:

    points → segment → track → collection of tracks
    points → route → collection of routes

A route or track that fails to summarize is logged and left without a
summary; its siblings are still summarized and merged.
"""

import logging
import time
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence, Union

from trip.shared.bounds import merge_bounds
from trip.shared.timespan import merge_time_spans

from .models import (
    Route,
    RouteCollection,
    Summary,
    Track,
    TrackCollection,
    TrackSegment,
)
from .summarizer import summarize_path

logger = logging.getLogger(__name__)


def summarize_route(route: Route, per_point_detail: bool = False) -> Route:
    """Return a copy of the route with its summary filled in."""
    result = summarize_path(route.points, per_point_detail)
    return replace(route, points=result.points, summary=result.summary)


def summarize_track(
    track: Track,
    calc_segments: bool = False,
    per_point_detail: bool = False
) -> Track:
    """
    Return a copy of the track with its summary filled in.

    The track summary is computed over all segment points joined into one
    virtual path, so the gap between consecutive segments counts towards
    the distance.

    Args:
        track: Track to summarize
        calc_segments: Also keep a summary on every segment
        per_point_detail: Compute bounds and per-point distance/speed/bearing
    """
    segment_summaries: List[Optional[Summary]] = []
    for segment in track.segments:
        if calc_segments:
            segment_summaries.append(
                summarize_path(segment.points, per_point_detail).summary
            )
        else:
            segment_summaries.append(None)

    joined = summarize_path(track.points, per_point_detail)

    # Hand the (possibly enriched) joined points back to their segments
    segments = []
    offset = 0
    for segment, summary in zip(track.segments, segment_summaries):
        count = len(segment.points)
        segments.append(
            TrackSegment(points=joined.points[offset:offset + count], summary=summary)
        )
        offset += count

    return replace(track, segments=segments, summary=joined.summary)


def _merge_extent(
    collection: Union[RouteCollection, TrackCollection],
    summaries: Iterable[Optional[Summary]]
) -> None:
    """Attach the union of bounds and time spans to the collection."""
    present = [s for s in summaries if s is not None]
    collection.bounds = merge_bounds(s.bounds for s in present)
    span = merge_time_spans(present)
    collection.start_time = span.start_time
    collection.end_time = span.end_time


def summarize_routes(
    routes: Sequence[Route],
    per_point_detail: bool = False
) -> RouteCollection:
    """
    Summarize every route and merge bounds and time span.

    An empty input gives an empty collection with no merged fields.
    """
    collection = RouteCollection()
    if not routes:
        return collection

    started = time.perf_counter()
    for route in routes:
        try:
            collection.routes.append(summarize_route(route, per_point_detail))
        except Exception:
            logger.exception(f"Failed to summarize route {route.name!r}")
            collection.routes.append(replace(route, summary=None))

    _merge_extent(collection, (r.summary for r in collection.routes))
    logger.debug(
        f"Filled distance elevation data for {len(routes)} routes "
        f"in {(time.perf_counter() - started) * 1000:.1f} ms"
    )
    return collection


def summarize_tracks(
    tracks: Sequence[Track],
    calc_segments: bool = False,
    per_point_detail: bool = False
) -> TrackCollection:
    """
    Summarize every track and merge bounds and time span.

    An empty input gives an empty collection with no merged fields.
    """
    collection = TrackCollection()
    if not tracks:
        return collection

    started = time.perf_counter()
    for track in tracks:
        try:
            collection.tracks.append(
                summarize_track(track, calc_segments, per_point_detail)
            )
        except Exception:
            logger.exception(f"Failed to summarize track {track.name!r}")
            collection.tracks.append(replace(track, summary=None))

    _merge_extent(collection, (t.summary for t in collection.tracks))
    logger.debug(
        f"Filled distance elevation data for {len(tracks)} tracks "
        f"in {(time.perf_counter() - started) * 1000:.1f} ms"
    )
    return collection
