"""
Tests for shared geographic functions.

Tests the haversine distance, bearing and speed calculations.
"""

import pytest
import math

from trip.shared.geo import (
    haversine,
    initial_bearing,
    calculate_speed_kmh,
    EARTH_RADIUS_KM,
)


# =============================================================================
# Test Haversine Distance
# =============================================================================

class TestHaversine:
    """Tests for haversine function."""

    def test_same_point(self):
        """Distance between same point should be 0."""
        dist = haversine(51.5, -0.13, 51.5, -0.13)
        assert dist == 0.0

    def test_known_distance_london_edinburgh(self):
        """Test with known distance (London to Edinburgh ~534km)."""
        dist = haversine(51.5074, -0.1278, 55.9533, -3.1883)
        assert 520 < dist < 545

    def test_small_distance(self):
        """0.001 degree latitude is about 111 meters."""
        dist = haversine(51.0, -1.0, 51.001, -1.0)
        assert 0.1 < dist < 0.12

    def test_symmetry(self):
        """Distance A->B should equal B->A."""
        dist_ab = haversine(51.0, -1.0, 52.0, -2.0)
        dist_ba = haversine(52.0, -2.0, 51.0, -1.0)
        assert dist_ab == pytest.approx(dist_ba, rel=0.0001)

    def test_east_west_distance(self):
        """At equator, 1 degree longitude ≈ 111 km."""
        dist = haversine(0.0, 0.0, 0.0, 1.0)
        assert 110 < dist < 112

    def test_earth_radius_constant(self):
        assert EARTH_RADIUS_KM == 6371.0

    def test_antimeridian(self):
        """2 degrees across the antimeridian at the equator ≈ 222 km."""
        dist = haversine(0.0, 179.0, 0.0, -179.0)
        assert 220 < dist < 225

    def test_nan_propagates(self):
        """Non-numeric coordinates give NaN rather than an exception."""
        assert math.isnan(haversine(math.nan, -1.0, 52.0, -1.0))


# =============================================================================
# Test Initial Bearing
# =============================================================================

class TestInitialBearing:
    """Tests for initial_bearing function."""

    def test_due_north(self):
        assert initial_bearing(51.0, -1.0, 52.0, -1.0) == pytest.approx(0.0, abs=1e-9)

    def test_due_east_at_equator(self):
        assert initial_bearing(0.0, 0.0, 0.0, 1.0) == pytest.approx(90.0)

    def test_due_south(self):
        assert initial_bearing(52.0, -1.0, 51.0, -1.0) == pytest.approx(180.0)

    def test_due_west_at_equator(self):
        """Westward bearings are normalized to compass degrees, not -90."""
        assert initial_bearing(0.0, 1.0, 0.0, 0.0) == pytest.approx(270.0)

    def test_range(self):
        """Bearings always fall in [0, 360)."""
        for lat2, lon2 in [(50.0, -2.0), (52.0, -2.0), (50.0, 0.0), (52.0, 0.0)]:
            bearing = initial_bearing(51.0, -1.0, lat2, lon2)
            assert 0.0 <= bearing < 360.0

    def test_north_east_quadrant(self):
        bearing = initial_bearing(51.0, -1.0, 51.5, -0.5)
        assert 0.0 < bearing < 90.0


# =============================================================================
# Test Speed
# =============================================================================

class TestCalculateSpeed:
    """Tests for calculate_speed_kmh function."""

    def test_one_km_in_six_minutes(self):
        assert calculate_speed_kmh(1.0, 360) == pytest.approx(10.0)

    def test_zero_elapsed(self):
        assert calculate_speed_kmh(1.0, 0) is None

    def test_negative_elapsed(self):
        """Out-of-order timestamps give no speed."""
        assert calculate_speed_kmh(1.0, -60) is None
