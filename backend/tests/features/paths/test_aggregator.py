"""
Tests for route/track aggregation.

Checks that summaries are filled at every level and that collection
bounds and time spans are merged from their members.
"""

from datetime import datetime, timedelta, timezone

import pytest

from trip.features.paths.aggregator import (
    summarize_route,
    summarize_routes,
    summarize_track,
    summarize_tracks,
)
from trip.features.paths.models import Point, Route, Track, TrackSegment
from trip.features.paths.summarizer import summarize_path
from trip.shared.bounds import bounds_of_coordinates


START = datetime(2017, 1, 12, 12, 32, tzinfo=timezone.utc)


def _point(lat, lng, ele=None, minutes=None):
    return Point(
        latitude=lat,
        longitude=lng,
        elevation=ele,
        timestamp=START + timedelta(minutes=minutes) if minutes is not None else None,
    )


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def routes():
    return [
        Route(name="Coast", points=[
            _point(58.61, -5.03, 10, 0),
            _point(57.30, -5.78, 40, 60),
        ]),
        Route(name="Island", points=[
            _point(57.44, -7.01, 5, 120),
            _point(57.73, -6.39, 25, 240),
        ]),
    ]


@pytest.fixture
def contiguous_track():
    """Two segments sharing their joining point."""
    return Track(name="Ridge", segments=[
        TrackSegment(points=[
            _point(57.00, -5.00, 100, 0),
            _point(57.01, -5.00, 150, 10),
            _point(57.02, -5.01, 120, 20),
        ]),
        TrackSegment(points=[
            _point(57.02, -5.01, 120, 20),
            _point(57.03, -5.02, 200, 30),
        ]),
    ])


# =============================================================================
# Test Routes
# =============================================================================

class TestSummarizeRoutes:

    def test_each_route_summarized(self, routes):
        collection = summarize_routes(routes)
        assert len(collection.routes) == 2
        assert all(r.summary is not None for r in collection.routes)
        assert collection.routes[0].summary.ascent_m == 30

    def test_merged_bounds_match_union_of_points(self, routes):
        collection = summarize_routes(routes, per_point_detail=True)
        all_points = [p for r in routes for p in r.points]
        assert collection.bounds == bounds_of_coordinates(p.coordinates for p in all_points)
        assert collection.bounds == (-7.01, 57.30, -5.03, 58.61)

    def test_merged_time_span(self, routes):
        collection = summarize_routes(routes)
        assert collection.start_time == START
        assert collection.end_time == START + timedelta(minutes=240)

    def test_no_bounds_without_detail(self, routes):
        assert summarize_routes(routes).bounds is None

    def test_empty(self):
        collection = summarize_routes([])
        assert collection.routes == []
        assert collection.bounds is None
        assert collection.start_time is None
        assert collection.end_time is None

    def test_input_routes_untouched(self, routes):
        summarize_routes(routes, per_point_detail=True)
        assert routes[0].summary is None
        assert routes[0].points[1].distance_km is None

    def test_failed_route_isolated(self, routes):
        """A broken route is left without summary; the others still merge."""
        broken = Route(name="Broken", points=[
            Point(latitude=None, longitude=-5.0),
            Point(latitude=57.0, longitude=-5.0),
        ])
        collection = summarize_routes([broken] + routes, per_point_detail=True)
        assert collection.routes[0].summary is None
        assert collection.routes[0].name == "Broken"
        assert collection.routes[1].summary is not None
        assert collection.bounds == (-7.01, 57.30, -5.03, 58.61)

    def test_summarize_route_copy(self, routes):
        route = summarize_route(routes[0], per_point_detail=True)
        assert route is not routes[0]
        assert route.name == "Coast"
        assert route.points[1].distance_km > 0


# =============================================================================
# Test Tracks
# =============================================================================

class TestSummarizeTrack:

    def test_contiguous_segments_sum_to_track(self, contiguous_track):
        track = summarize_track(contiguous_track, calc_segments=True)
        segment_distance = sum(s.summary.distance_km for s in track.segments)
        segment_ascent = sum(s.summary.ascent_m for s in track.segments)
        segment_descent = sum(s.summary.descent_m for s in track.segments)
        assert track.summary.distance_km == pytest.approx(segment_distance)
        assert track.summary.ascent_m == pytest.approx(segment_ascent)
        assert track.summary.descent_m == pytest.approx(segment_descent)

    def test_track_summary_joins_segments(self, contiguous_track):
        track = summarize_track(contiguous_track)
        expected = summarize_path(contiguous_track.points).summary
        assert track.summary == expected

    def test_gap_between_segments_counts(self):
        track = Track(segments=[
            TrackSegment(points=[_point(57.00, -5.0)]),
            TrackSegment(points=[_point(57.01, -5.0)]),
        ])
        result = summarize_track(track, calc_segments=True)
        assert result.summary.distance_km > 0
        assert all(s.summary.distance_km == 0 for s in result.segments)

    def test_segment_summaries_only_on_request(self, contiguous_track):
        track = summarize_track(contiguous_track)
        assert all(s.summary is None for s in track.segments)

    def test_detail_handed_back_to_segments(self, contiguous_track):
        track = summarize_track(contiguous_track, per_point_detail=True)
        assert [len(s.points) for s in track.segments] == [3, 2]
        # First point of the second segment measures from the end of the first
        assert track.segments[1].points[0].distance_km == 0.0
        assert track.segments[1].points[1].distance_km > 0

    def test_segment_bounds(self, contiguous_track):
        track = summarize_track(contiguous_track, calc_segments=True, per_point_detail=True)
        assert track.segments[1].summary.bounds == (-5.02, 57.02, -5.01, 57.03)


class TestSummarizeTracks:

    def test_merged_extent(self, contiguous_track):
        other = Track(name="Other", segments=[
            TrackSegment(points=[_point(56.5, -4.0, minutes=-30), _point(56.6, -4.1, minutes=-20)]),
        ])
        collection = summarize_tracks([contiguous_track, other], per_point_detail=True)
        assert collection.bounds == (-5.02, 56.5, -4.0, 57.03)
        assert collection.start_time == START - timedelta(minutes=30)
        assert collection.end_time == START + timedelta(minutes=30)

    def test_empty(self):
        collection = summarize_tracks([])
        assert collection.tracks == []
        assert collection.bounds is None
        assert collection.start_time is None

    def test_failed_track_isolated(self, contiguous_track):
        broken = Track(name="Broken", segments=[
            TrackSegment(points=[Point(latitude=None, longitude=-5.0), _point(57.0, -5.0)]),
        ])
        collection = summarize_tracks([contiguous_track, broken], calc_segments=True)
        assert collection.tracks[0].summary is not None
        assert collection.tracks[1].summary is None
        assert collection.start_time == START
