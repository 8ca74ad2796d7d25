"""
Path Summary Routes

Distance, elevation and extent figures for paths, routes and tracks.
"""

from fastapi import APIRouter

from trip.features.paths import (
    point_from_dict,
    route_from_dict,
    summarize_path,
    summarize_routes,
    summarize_tracks,
    track_from_dict,
)
from trip.features.paths.schemas import (
    CollectionExtent,
    PathSummaryRequest,
    PathSummaryResponse,
    PointSchema,
    RouteSummarySchema,
    RoutesSummaryRequest,
    RoutesSummaryResponse,
    SummarySchema,
    TrackSummarySchema,
    TracksSummaryRequest,
    TracksSummaryResponse,
)

router = APIRouter()


@router.post("/paths/summary", response_model=PathSummaryResponse)
async def summarize_single_path(request: PathSummaryRequest):
    """
    Summarize one ordered list of points.

    With per_point_detail the response also carries bounds and
    per-point distance/speed/bearing.
    """
    points = [point_from_dict(p) for p in request.points]
    result = summarize_path(points, request.per_point_detail)

    return PathSummaryResponse(
        summary=SummarySchema.from_summary(result.summary),
        points=(
            [PointSchema.from_point(p) for p in result.points]
            if request.per_point_detail else None
        ),
    )


@router.post("/routes/summary", response_model=RoutesSummaryResponse)
async def summarize_route_list(request: RoutesSummaryRequest):
    """Summarize several routes and merge their bounds and time span."""
    routes = [route_from_dict(r) for r in request.routes]
    collection = summarize_routes(routes, request.per_point_detail)

    return RoutesSummaryResponse(
        routes=[
            RouteSummarySchema.from_route(r, request.per_point_detail)
            for r in collection.routes
        ],
        **CollectionExtent.extent_of(collection),
    )


@router.post("/tracks/summary", response_model=TracksSummaryResponse)
async def summarize_track_list(request: TracksSummaryRequest):
    """Summarize several tracks and merge their bounds and time span."""
    tracks = [track_from_dict(t) for t in request.tracks]
    collection = summarize_tracks(
        tracks,
        calc_segments=request.calc_segments,
        per_point_detail=request.per_point_detail
    )

    return TracksSummaryResponse(
        tracks=[
            TrackSummarySchema.from_track(t, request.per_point_detail)
            for t in collection.tracks
        ],
        **CollectionExtent.extent_of(collection),
    )
