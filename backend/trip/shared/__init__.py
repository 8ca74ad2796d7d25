"""
Shared utilities (NOT business logic).

Usage:
    from trip.shared import haversine, merge_bounds
    from trip.shared.formulas import scarfs_equivalence
"""
from .geo import (
    haversine,
    initial_bearing,
    calculate_speed_kmh,
    EARTH_RADIUS_KM,
)
from .bounds import (
    Bounds,
    bounds_of_coordinates,
    normalize_bounds,
    merge_bounds,
    bounds_range,
    bounds_center,
)
from .timespan import (
    TimeSpan,
    time_span_of,
    merge_time_spans,
)
from .formulas import (
    TravelTime,
    scarfs_equivalence,
    SCARF_ASCENT_KM_PER_M,
)

__all__ = [
    # geo
    "haversine",
    "initial_bearing",
    "calculate_speed_kmh",
    "EARTH_RADIUS_KM",
    # bounds
    "Bounds",
    "bounds_of_coordinates",
    "normalize_bounds",
    "merge_bounds",
    "bounds_range",
    "bounds_center",
    # time spans
    "TimeSpan",
    "time_span_of",
    "merge_time_spans",
    # formulas
    "TravelTime",
    "scarfs_equivalence",
    "SCARF_ASCENT_KM_PER_M",
]
