"""
Tests for input normalization.

Both external point schemas (GPX-style `ele`, logged `altitude`) must map
onto the same Point.
"""

import math
from datetime import datetime, timezone

from trip.features.paths.normalize import (
    iso_date,
    point_from_dict,
    route_from_dict,
    to_elevation,
    to_float,
    track_from_dict,
)


# =============================================================================
# Test Coercion
# =============================================================================

class TestToFloat:

    def test_numeric_string(self):
        assert to_float("57.30") == 57.30

    def test_number(self):
        assert to_float(12) == 12.0

    def test_garbage_is_nan(self):
        assert math.isnan(to_float("north"))

    def test_none_is_nan(self):
        assert math.isnan(to_float(None))

    def test_bool_is_nan(self):
        assert math.isnan(to_float(True))


class TestToElevation:

    def test_numeric_string(self):
        assert to_elevation("1000") == 1000.0

    def test_zero_is_valid(self):
        """Sea level is an elevation, not a missing one."""
        assert to_elevation(0) == 0.0

    def test_non_numeric(self):
        assert to_elevation("high") is None

    def test_blank(self):
        assert to_elevation("") is None
        assert to_elevation(None) is None

    def test_nan(self):
        assert to_elevation(math.nan) is None


# =============================================================================
# Test Timestamps
# =============================================================================

class TestIsoDate:

    def test_zulu_string(self):
        assert iso_date("2017-09-18T14:00:00Z") == datetime(2017, 9, 18, 14, 0, tzinfo=timezone.utc)

    def test_offset_string(self):
        parsed = iso_date("2017-09-18T16:00:00+02:00")
        assert parsed == datetime(2017, 9, 18, 14, 0, tzinfo=timezone.utc)

    def test_naive_string_is_utc(self):
        parsed = iso_date("2017-09-18T14:00:00")
        assert parsed.tzinfo is not None
        assert parsed == datetime(2017, 9, 18, 14, 0, tzinfo=timezone.utc)

    def test_epoch_milliseconds(self):
        assert iso_date(1505743200000) == datetime(2017, 9, 18, 14, 0, tzinfo=timezone.utc)

    def test_datetime_passthrough(self):
        ts = datetime(2017, 9, 18, 14, 0, tzinfo=timezone.utc)
        assert iso_date(ts) == ts

    def test_unparsable(self):
        assert iso_date("yesterday") is None

    def test_missing(self):
        assert iso_date(None) is None
        assert iso_date("") is None


# =============================================================================
# Test Point Schemas
# =============================================================================

class TestPointFromDict:

    def test_gpx_schema(self):
        point = point_from_dict({
            "lat": "57.30", "lon": "-5.78", "ele": "1000",
            "time": "2017-09-18T14:00:00Z", "hdop": "2.5",
        })
        assert point.latitude == 57.30
        assert point.longitude == -5.78
        assert point.elevation == 1000.0
        assert point.timestamp == datetime(2017, 9, 18, 14, 0, tzinfo=timezone.utc)
        assert point.hdop == 2.5

    def test_logged_location_schema(self):
        point = point_from_dict({
            "latitude": 57.30, "longitude": -5.78, "altitude": 1000,
            "timestamp": 1505743200000,
        })
        assert point.latitude == 57.30
        assert point.longitude == -5.78
        assert point.elevation == 1000.0
        assert point.timestamp == datetime(2017, 9, 18, 14, 0, tzinfo=timezone.utc)

    def test_both_schemas_agree(self):
        a = point_from_dict({"lat": 57.3, "lng": -5.78, "ele": 12})
        b = point_from_dict({"latitude": 57.3, "longitude": -5.78, "altitude": 12})
        assert a == b

    def test_bad_values_are_lenient(self):
        point = point_from_dict({"lat": "x", "lng": -5.78, "ele": "y", "time": "z"})
        assert math.isnan(point.latitude)
        assert point.elevation is None
        assert point.timestamp is None

    def test_computed_fields_start_empty(self):
        point = point_from_dict({"lat": 1, "lng": 2})
        assert point.distance_km is None
        assert point.speed_kmh is None
        assert point.bearing is None


class TestContainers:

    def test_route(self):
        route = route_from_dict({"name": "Ridge", "points": [{"lat": 1, "lng": 2}, {"lat": 3, "lng": 4}]})
        assert route.name == "Ridge"
        assert [p.latitude for p in route.points] == [1.0, 3.0]

    def test_route_without_points(self):
        assert route_from_dict({}).points == []

    def test_track(self):
        track = track_from_dict({
            "name": "Day 1",
            "segments": [
                {"points": [{"lat": 1, "lng": 2}]},
                {"points": [{"lat": 3, "lng": 4}, {"lat": 5, "lng": 6}]},
            ],
        })
        assert track.name == "Day 1"
        assert [len(s.points) for s in track.segments] == [1, 2]
        assert [p.latitude for p in track.points] == [1.0, 3.0, 5.0]
