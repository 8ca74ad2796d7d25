"""
Shared route dependencies.
"""

from fastapi import Request

from trip.features.elevation import ElevationResolver


def get_elevation_resolver(request: Request) -> ElevationResolver:
    """The resolver built at startup (see trip.main.lifespan)."""
    return request.app.state.elevation_resolver
