"""
Elevation exceptions.

Any of these aborts the whole batch: no elevation is applied to any point.
"""


class ElevationError(Exception):
    """Base elevation error."""
    pass


class ElevationServiceError(ElevationError):
    """Transport or parse failure talking to the elevation service."""
    pass


class ElevationMismatch(ElevationError):
    """Returned locations do not correspond positionally to the request."""
    pass
