"""
Raster elevation tiles.

A TileSet is every GeoTIFF in the configured dataset directory. Each tile
is opened once at load time to read its geotransform and then closed to
save memory. It is reopened on the first lookup inside its bounds and
closed again once it has been idle for the configured time.

Tile membership never changes after load. Each tile has its own lock, so
lookups may run from worker threads.
"""

import logging
import math
import threading
import time
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

import rasterio
from rasterio.windows import Window

logger = logging.getLogger(__name__)

# Raw value marking a pixel without data (SRTM convention)
NO_DATA = -32768

TILE_SUFFIX = ".tif"


class RasterTile:
    """
    One georeferenced elevation raster.

    Bounds come from the affine geotransform:
        lng = left + col * pixel_width + row * xskew
        lat = top + col * yskew + row * line_height
    """

    def __init__(self, path: Path, idle_close_ms: Optional[int] = None):
        self.path = Path(path)
        self.idle_close_ms = idle_close_ms
        self._dataset = None
        self._lock = threading.Lock()
        self.last_access = 0.0

        with self._lock:
            dataset = self._open()
            try:
                transform = dataset.transform
                self.left = transform.c
                self.pixel_width = transform.a
                self.xskew = transform.b
                self.top = transform.f
                self.yskew = transform.d
                self.line_height = transform.e
                self.width = dataset.width
                self.height = dataset.height
                self.nodata = dataset.nodata
            finally:
                self._close()

        self.right = self.left + self.width * self.pixel_width
        self.bottom = self.top + self.height * self.line_height

    def __repr__(self):
        return f"<RasterTile {self.path.name} [{self.left}, {self.bottom}, {self.right}, {self.top}]>"

    # -------------------------------------------------------------------------
    # Dataset lifecycle (call with the lock held)
    # -------------------------------------------------------------------------

    def _open(self):
        logger.debug(f"Opening data set for path: {self.path}")
        self._dataset = rasterio.open(self.path)
        self.last_access = time.monotonic()
        return self._dataset

    def _close(self) -> None:
        if self._dataset is not None:
            logger.debug(f"Closing dataset for {self.path}")
            self._dataset.close()
            self._dataset = None

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    @property
    def is_open(self) -> bool:
        return self._dataset is not None

    def contains(self, longitude: float, latitude: float) -> bool:
        """True if the point falls inside the tile (edges included)."""
        return (
            min(self.left, self.right) <= longitude <= max(self.left, self.right)
            and min(self.bottom, self.top) <= latitude <= max(self.bottom, self.top)
        )

    def pixel_for(self, longitude: float, latitude: float) -> tuple[int, int]:
        """
        Invert the geotransform to get the (col, row) holding a point.

        Points on the right or bottom edge map to the last pixel.
        """
        det = self.pixel_width * self.line_height - self.xskew * self.yskew
        dx = longitude - self.left
        dy = latitude - self.top
        col = (dx * self.line_height - dy * self.xskew) / det
        row = (dy * self.pixel_width - dx * self.yskew) / det
        col = min(max(math.floor(col), 0), self.width - 1)
        row = min(max(math.floor(row), 0), self.height - 1)
        return col, row

    def elevation(self, longitude: float, latitude: float) -> Optional[float]:
        """
        Sample the first band at a point.

        Opens the dataset if it was closed. No-data pixels give None.
        """
        col, row = self.pixel_for(longitude, latitude)
        with self._lock:
            dataset = self._dataset if self._dataset is not None else self._open()
            self.last_access = time.monotonic()
            value = dataset.read(1, window=Window(col, row, 1, 1))[0, 0].item()

        if value == NO_DATA or (self.nodata is not None and value == self.nodata):
            return None
        return float(value)

    def close_if_idle(self) -> bool:
        """
        Release the dataset if unused for at least idle_close_ms.

        Returns:
            True if the dataset was closed by this call
        """
        with self._lock:
            if self._dataset is None or not self.idle_close_ms:
                return False
            idle_ms = (time.monotonic() - self.last_access) * 1000
            if idle_ms < self.idle_close_ms:
                return False
            logger.debug(f"Closing tile {self.path} as is {idle_ms:.0f} ms old")
            self._close()
            return True

    def close(self) -> None:
        """Release the dataset. Safe to call repeatedly."""
        with self._lock:
            self._close()


class TileSet:
    """
    All raster tiles of a dataset directory.

    Usage:
        tiles = TileSet.load("/srv/elevation", idle_close_ms=60000)
        results = tiles.lookup([{"latitude": 51.5, "longitude": -0.13}])
    """

    def __init__(self, tiles: Sequence[RasterTile]):
        self._tiles = tuple(tiles)

    @classmethod
    def load(cls, directory: str | Path, idle_close_ms: Optional[int] = None) -> "TileSet":
        """
        Read the bounds of every .tif file in a directory.

        Files that fail to load are logged and left out.

        Raises:
            OSError: If the directory cannot be read
        """
        directory = Path(directory)
        logger.debug(f"Searching for tif files in {directory}")

        tiles: List[RasterTile] = []
        for path in sorted(directory.iterdir()):
            if path.suffix.lower() != TILE_SUFFIX:
                logger.debug(f"Ignoring {path.name} (not a {TILE_SUFFIX} extension)")
                continue
            if not path.is_file():
                logger.debug(f"Ignoring {path.name} (not a file)")
                continue
            try:
                tile = RasterTile(path, idle_close_ms)
            except Exception:
                logger.exception(f"Failed to add file {path} to tile set")
                continue
            logger.debug(f"Adding tile {tile.path} to set")
            tiles.append(tile)

        logger.info(f"Loaded {len(tiles)} elevation data tiles")
        return cls(tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[RasterTile]:
        return iter(self._tiles)

    def tile_for(self, longitude: float, latitude: float) -> Optional[RasterTile]:
        """
        First tile containing the point.

        Every other tile visited that does not contain the point gets an
        idle check.
        """
        match = None
        for tile in self._tiles:
            if tile.contains(longitude, latitude):
                if match is None:
                    match = tile
            else:
                tile.close_if_idle()

        if match is None:
            logger.debug(f"Failed to find tile containing latitude: {latitude} and longitude: {longitude}")
        return match

    def elevation(self, longitude: float, latitude: float) -> Optional[float]:
        tile = self.tile_for(longitude, latitude)
        if tile is None:
            return None
        return tile.elevation(longitude, latitude)

    def lookup(self, locations: Sequence[dict]) -> List[dict]:
        """
        Resolve elevations for a batch of locations.

        Returns the locations in the same order with an `elevation` key,
        the same shape the remote service answers with.
        """
        results = []
        for location in locations:
            latitude = location["latitude"]
            longitude = location["longitude"]
            results.append({
                "latitude": latitude,
                "longitude": longitude,
                "elevation": self.elevation(longitude, latitude),
            })
        return results

    def close(self) -> None:
        for tile in self._tiles:
            tile.close()
