"""
Elevation Routes

Fill missing elevations for a batch of points.
"""

from fastapi import APIRouter, Depends, HTTPException

from trip.api.deps import get_elevation_resolver
from trip.features.elevation import (
    ElevationMismatch,
    ElevationResolver,
    ElevationServiceError,
)
from trip.features.elevation.schemas import ElevationFillRequest, ElevationFillResponse
from trip.features.paths import point_from_dict
from trip.features.paths.schemas import PointSchema

router = APIRouter()


@router.post("/fill", response_model=ElevationFillResponse)
async def fill_elevations(
    request: ElevationFillRequest,
    resolver: ElevationResolver = Depends(get_elevation_resolver)
):
    """
    Fill elevations from the configured source.

    The batch is all or nothing: on any error no point is changed.
    """
    points = [point_from_dict(p) for p in request.points]

    try:
        filled = await resolver.fill_elevations(
            points,
            force=request.force,
            skip_if_any_exist=request.skip_if_any_exist
        )
    except ElevationMismatch as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ElevationServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return ElevationFillResponse(
        strategy=resolver.strategy,
        points=[PointSchema.from_point(p) for p in filled],
    )
