"""
Elevation schemas.

Pydantic models for elevation fill requests.
"""

from typing import Any, Dict, List

from pydantic import BaseModel

from trip.features.paths.schemas import PointSchema


class ElevationFillRequest(BaseModel):
    """Points in either external schema plus fill options."""
    points: List[Dict[str, Any]]
    force: bool = False
    skip_if_any_exist: bool = False


class ElevationFillResponse(BaseModel):
    strategy: str
    points: List[PointSchema]
