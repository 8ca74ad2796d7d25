"""
Elevation Resolver

Fills in point elevations from local raster tiles or a remote service,
never both. Built once at startup and handed to whoever needs it.

Batch semantics:
- The whole batch is looked up, even if only some points lack elevation
- Results must match the request position by position (5 decimals);
  any mismatch aborts the batch and nothing is applied
"""

import asyncio
import logging
import math
from dataclasses import replace
from typing import List, Optional, Sequence

from trip.config import Settings
from trip.features.paths.models import Point, Route
from trip.features.paths.normalize import to_elevation, to_float

from .errors import ElevationError, ElevationMismatch, ElevationServiceError
from .remote import RemoteElevationClient
from .tiles import TileSet

logger = logging.getLogger(__name__)

COORDINATE_PRECISION = 5


def round_coordinate(value: float) -> float:
    return round(value, COORDINATE_PRECISION)


def _same_location(point: Point, location) -> bool:
    if not isinstance(location, dict):
        return False
    return (
        round_coordinate(point.latitude) == round_coordinate(to_float(location.get("latitude")))
        and round_coordinate(point.longitude) == round_coordinate(to_float(location.get("longitude")))
    )


class ElevationResolver:
    """
    Resolves elevations for batches of points.

    Usage:
        resolver = ElevationResolver.from_settings(settings)
        points = await resolver.fill_elevations(points)
        ...
        resolver.close()
    """

    def __init__(
        self,
        tiles: Optional[TileSet] = None,
        remote: Optional[RemoteElevationClient] = None,
        unavailable: Optional[str] = None
    ):
        if tiles is not None and remote is not None:
            raise ValueError("Configure either raster tiles or a remote elevation service, not both")
        self.tiles = tiles
        self.remote = remote
        # Set when the configured source could not be loaded; every lookup fails with it
        self.unavailable = unavailable

    @classmethod
    def from_settings(cls, settings: Settings) -> "ElevationResolver":
        """Raster tiles win if a dataset directory is configured."""
        if settings.elevation_dataset_dir:
            try:
                tiles = TileSet.load(
                    settings.elevation_dataset_dir,
                    idle_close_ms=settings.elevation_tile_cache_ms
                )
            except OSError as e:
                logger.error(f"Failed to load elevation tiles from {settings.elevation_dataset_dir}: {e}")
                return cls(unavailable=f"Elevation dataset unavailable: {e}")
            return cls(tiles=tiles)

        if settings.elevation_provider_url:
            logger.info(f"Using remote elevation service {settings.elevation_provider_url}")
            return cls(remote=RemoteElevationClient.from_settings(settings))

        logger.debug("No elevation source configured - elevations will not be filled")
        return cls()

    @property
    def strategy(self) -> str:
        if self.unavailable is not None:
            return "unavailable"
        if self.tiles is not None:
            return "raster"
        if self.remote is not None:
            return "remote"
        return "none"

    async def _lookup(self, locations: List[dict]) -> list:
        if self.tiles is not None:
            logger.debug("Filling elevations using local raster tiles")
            return await asyncio.to_thread(self.tiles.lookup, locations)
        return await self.remote.lookup(locations)

    async def fill_elevations(
        self,
        points: Sequence[Point],
        force: bool = False,
        skip_if_any_exist: bool = False
    ) -> List[Point]:
        """
        Return the points with missing elevations filled in.

        Args:
            points: Points to enrich (left untouched)
            force: Overwrite elevations that are already present
            skip_if_any_exist: Leave the batch alone if any point has one

        Returns:
            New list of points; unchanged points are the same objects

        Raises:
            ElevationServiceError: Lookup failed or the source is unavailable
            ElevationMismatch: A coordinate is not numeric, or results do
                not line up with the request
        """
        points = list(points)
        if not points or self.strategy == "none":
            return points

        existing = sum(1 for p in points if p.elevation is not None)
        if skip_if_any_exist and existing:
            logger.debug("One or more elevations exist in batch, skipping update")
            return points
        if existing == len(points) and not force:
            logger.debug("All elevations exist in batch, not updating")
            return points

        requested = [
            {
                "latitude": round_coordinate(p.latitude),
                "longitude": round_coordinate(p.longitude),
            }
            for p in points
        ]
        for index, location in enumerate(requested):
            # NaN never matches a returned location
            if not (math.isfinite(location["latitude"]) and math.isfinite(location["longitude"])):
                logger.error(f"Location {index} has no numeric coordinates, not looking up batch")
                raise ElevationMismatch(f"Location {index} has non-numeric coordinates")

        if self.unavailable is not None:
            raise ElevationServiceError(self.unavailable)

        results = await self._lookup(requested)

        if len(results) != len(points):
            logger.error(
                f"Invalid number of locations received. "
                f"Expected {len(points)} got {len(results)}"
            )
            raise ElevationMismatch("Elevation service returned unexpected values")

        for index, (point, location) in enumerate(zip(points, results)):
            if not _same_location(point, location):
                logger.error(
                    f"Returned location {index} does not match the one sent "
                    f"to the elevation service"
                )
                raise ElevationMismatch(
                    "Returned locations do not appear to be the same as those sent"
                )

        filled = []
        for point, location in zip(points, results):
            elevation = to_elevation(location.get("elevation"))
            if elevation is not None and (force or point.elevation is None):
                filled.append(replace(point, elevation=elevation))
            else:
                filled.append(point)
        return filled

    async def fill_elevations_for_routes(
        self,
        routes: Sequence[Route],
        force: bool = False,
        skip_if_any_exist: bool = False
    ) -> None:
        """
        Fill elevations for every route, replacing route.points in place.

        Every route is attempted; the first error is raised afterwards.
        """
        first_error: Optional[ElevationError] = None
        for route in routes:
            try:
                route.points = await self.fill_elevations(
                    route.points,
                    force=force,
                    skip_if_any_exist=skip_if_any_exist
                )
            except ElevationError as e:
                logger.warning(f"Failed to fill elevations for route {route.name!r}: {e}")
                if first_error is None:
                    first_error = e

        if first_error is not None:
            raise first_error

    def close(self) -> None:
        """Release every open raster dataset."""
        if self.tiles is not None:
            self.tiles.close()
