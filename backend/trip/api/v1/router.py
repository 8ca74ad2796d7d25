"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from trip.api.v1.routes import elevation, equivalence, gpx, paths

api_router = APIRouter()

api_router.include_router(paths.router, tags=["Paths"])
api_router.include_router(elevation.router, prefix="/elevation", tags=["Elevation"])
api_router.include_router(equivalence.router, tags=["Travel time"])
api_router.include_router(gpx.router, prefix="/gpx", tags=["GPX"])
