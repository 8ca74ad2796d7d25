"""
Travel Time Routes

Scarf's Equivalence estimate for a distance and ascent.
"""

from typing import Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel

from trip.config import settings
from trip.shared.formulas import scarfs_equivalence

router = APIRouter()


class EquivalenceResponse(BaseModel):
    """Estimated travel time."""
    distance_km: Optional[float] = None
    ascent_m: Optional[float] = None
    flat_speed_kmh: float
    hours: Optional[float] = None
    minutes: Optional[float] = None


@router.get("/equivalence", response_model=EquivalenceResponse)
async def get_equivalence(
    distance_km: Optional[float] = Query(None, ge=0),
    ascent_m: Optional[float] = Query(None, ge=0),
    flat_speed_kmh: Optional[float] = Query(None, gt=0)
):
    """
    Estimate travel time with Scarf's Equivalence.

    Flat speed defaults to the configured average flat speed.
    """
    speed = flat_speed_kmh if flat_speed_kmh is not None else settings.average_flat_speed_kph
    estimate = scarfs_equivalence(distance_km, ascent_m, speed)

    return EquivalenceResponse(
        distance_km=distance_km,
        ascent_m=ascent_m,
        flat_speed_kmh=speed,
        hours=estimate.hours,
        minutes=estimate.minutes,
    )
