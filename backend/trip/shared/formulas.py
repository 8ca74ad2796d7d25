"""
Mathematical formulas for route time calculations.
"""

import math
from dataclasses import dataclass
from typing import Optional

# Kilometres of flat ground equivalent to one metre of ascent
SCARF_ASCENT_KM_PER_M = 0.00792


@dataclass(frozen=True)
class TravelTime:
    """Estimated time split into whole hours and remaining minutes."""
    hours: Optional[float]
    minutes: Optional[float]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def scarfs_equivalence(
    distance_km: Optional[float] = None,
    ascent_m: Optional[float] = None,
    flat_speed_kmh: Optional[float] = None
) -> TravelTime:
    """
    Estimate travel time using Scarf's Equivalence (2007).

    Formula: t = (distance + ascent * 0.00792) / flat_speed

    Args:
        distance_km: Horizontal distance in kilometers
        ascent_m: Total ascent in meters
        flat_speed_kmh: Walking speed on flat ground

    Returns:
        TravelTime. Without a speed the time is infinite, at infinite speed
        it is zero, and with neither distance nor ascent it is unknown.

    Notes:
        - Either distance or ascent may be missing, only the known term is used
        - Hours are truncated, minutes are rounded
    """
    if flat_speed_kmh is None or flat_speed_kmh <= 0:
        return TravelTime(hours=math.inf, minutes=math.inf)
    if math.isinf(flat_speed_kmh):
        return TravelTime(hours=0, minutes=0)
    if distance_km is None and ascent_m is None:
        return TravelTime(hours=None, minutes=None)

    equivalent_km = 0.0
    if distance_km is not None:
        equivalent_km += distance_km
    if ascent_m is not None:
        equivalent_km += ascent_m * SCARF_ASCENT_KM_PER_M

    time_hours = equivalent_km / flat_speed_kmh
    hours = math.floor(time_hours)
    minutes = _round_half_up((time_hours - hours) * 60)

    return TravelTime(hours=hours, minutes=minutes)
