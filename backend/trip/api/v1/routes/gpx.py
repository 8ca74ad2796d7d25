"""
GPX Import Routes

Summarize an uploaded GPX file the way an itinerary import does:
fill missing route elevations, then compute route and track summaries.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from pydantic import BaseModel

from trip.api.deps import get_elevation_resolver
from trip.features.elevation import ElevationError, ElevationResolver
from trip.features.paths import (
    parse_gpx,
    routes_from_gpx,
    summarize_routes,
    summarize_tracks,
    tracks_from_gpx,
    waypoint_bounds,
    waypoints_from_gpx,
)
from trip.features.paths.schemas import (
    CollectionExtent,
    RouteSummarySchema,
    RoutesSummaryResponse,
    TrackSummarySchema,
    TracksSummaryResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_UPLOAD_BYTES = 20 * 1024 * 1024


class GPXSummaryResponse(BaseModel):
    """Counts and summaries of an imported GPX file."""
    waypoint_count: int
    route_count: int
    track_count: int
    waypoint_bounds: Optional[List[float]] = None
    routes: RoutesSummaryResponse
    tracks: TracksSummaryResponse


@router.post("/summary", response_model=GPXSummaryResponse)
async def summarize_gpx(
    file: UploadFile = File(...),
    resolver: ElevationResolver = Depends(get_elevation_resolver)
):
    """
    Upload a GPX file and summarize its contents.

    Route elevations are only looked up when no route point has one.
    A failing elevation lookup does not fail the import.
    """
    # Validate file
    if not file.filename or not file.filename.lower().endswith('.gpx'):
        raise HTTPException(status_code=400, detail="Only .gpx files are allowed")

    content = await file.read()

    if len(content) == 0:
        raise HTTPException(status_code=400, detail="File is empty")

    if len(content) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=400, detail="File too large (max 20MB)")

    try:
        gpx = parse_gpx(content)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    waypoints = waypoints_from_gpx(gpx)
    routes = routes_from_gpx(gpx)
    tracks = tracks_from_gpx(gpx)

    try:
        await resolver.fill_elevations_for_routes(routes, skip_if_any_exist=True)
    except ElevationError as e:
        logger.warning(f"Importing {file.filename} without looked-up elevations: {e}")

    route_collection = summarize_routes(routes, per_point_detail=True)
    track_collection = summarize_tracks(tracks, calc_segments=True, per_point_detail=True)
    bounds = waypoint_bounds(waypoints)

    return GPXSummaryResponse(
        waypoint_count=len(waypoints),
        route_count=len(routes),
        track_count=len(tracks),
        waypoint_bounds=list(bounds) if bounds else None,
        routes=RoutesSummaryResponse(
            routes=[RouteSummarySchema.from_route(r) for r in route_collection.routes],
            **CollectionExtent.extent_of(route_collection),
        ),
        tracks=TracksSummaryResponse(
            tracks=[TrackSummarySchema.from_track(t) for t in track_collection.tracks],
            **CollectionExtent.extent_of(track_collection),
        ),
    )
