"""
Elevation lookup module.

Usage:
    from trip.features.elevation import ElevationResolver

    resolver = ElevationResolver.from_settings(settings)
    points = await resolver.fill_elevations(points, skip_if_any_exist=True)

Components:
- ElevationResolver: batch fill with positional correspondence check
- TileSet, RasterTile: local GeoTIFF tiles with idle close
- RemoteElevationClient: HTTP elevation service
"""

from .errors import ElevationError, ElevationMismatch, ElevationServiceError
from .remote import RemoteElevationClient
from .resolver import ElevationResolver, round_coordinate
from .tiles import NO_DATA, RasterTile, TileSet

__all__ = [
    # Errors
    "ElevationError",
    "ElevationMismatch",
    "ElevationServiceError",
    # Resolver
    "ElevationResolver",
    "round_coordinate",
    # Strategies
    "RemoteElevationClient",
    "RasterTile",
    "TileSet",
    "NO_DATA",
]
