"""Tests for gridsquare.geometry module."""

import pytest

from gridsquare.geometry import (
    buffer_polygon,
    centroid,
    convex_hull,
    dedupe_consecutive,
    distance_to_segment,
    distance_to_square_edge,
    haversine_km,
    is_point_in_polygon,
)
from gridsquare.regions import CENTRAL_LONDON_POLYGON

# 0.01 degrees of latitude on a 6371km sphere
_HUNDREDTH_DEG_KM = 1.11195


class TestHaversine:
    def test_same_point_zero(self):
        assert haversine_km(51.5, -0.1, 51.5, -0.1) == 0.0

    def test_london_to_manchester(self):
        dist = haversine_km(51.5074, -0.1278, 53.4808, -2.2426)
        assert 255 < dist < 270

    def test_symmetric(self):
        d1 = haversine_km(51.5, -0.1, 52.0, -1.0)
        d2 = haversine_km(52.0, -1.0, 51.5, -0.1)
        assert abs(d1 - d2) < 0.001


class TestDistanceToSegment:
    def test_perpendicular_foot(self):
        dist = distance_to_segment(51.01, 0.05, 51.0, 0.0, 51.0, 0.1)
        assert dist == pytest.approx(_HUNDREDTH_DEG_KM, abs=1e-3)

    def test_clamps_to_nearest_endpoint(self):
        dist = distance_to_segment(51.0, 0.2, 51.0, 0.0, 51.0, 0.1)
        assert dist == pytest.approx(haversine_km(51.0, 0.2, 51.0, 0.1))

    def test_zero_length_segment_is_point_distance(self):
        dist = distance_to_segment(51.01, 0.0, 51.0, 0.0, 51.0, 0.0)
        assert dist == pytest.approx(haversine_km(51.01, 0.0, 51.0, 0.0))


class TestDistanceToSquareEdge:
    @pytest.mark.parametrize(
        ("lat", "lon"),
        [(51.005, 0.005), (51.0, 0.0), (51.01, 0.01), (51.001, 0.009)],
    )
    def test_inside_is_exactly_zero(self, simple_corners, lat: float, lon: float):
        c = simple_corners
        assert distance_to_square_edge(lat, lon, c.sw, c.ne, c.nw, c.se) == 0.0

    def test_north_of_square(self, simple_corners):
        c = simple_corners
        dist = distance_to_square_edge(51.02, 0.005, c.sw, c.ne, c.nw, c.se)
        assert dist == pytest.approx(_HUNDREDTH_DEG_KM, abs=1e-3)

    def test_outside_is_positive(self, simple_corners):
        c = simple_corners
        assert distance_to_square_edge(50.99, -0.01, c.sw, c.ne, c.nw, c.se) > 0


class TestPointInPolygon:
    def test_inside_unit_square(self, unit_square):
        assert is_point_in_polygon(0.5, 0.5, unit_square) is True

    @pytest.mark.parametrize(("x", "y"), [(1.5, 0.5), (-0.1, 0.5), (0.5, 2.0)])
    def test_outside_unit_square(self, unit_square, x: float, y: float):
        assert is_point_in_polygon(x, y, unit_square) is False

    def test_concave_notch(self, l_shape):
        assert is_point_in_polygon(0.5, 1.5, l_shape) is True
        assert is_point_in_polygon(1.5, 1.5, l_shape) is False

    @pytest.mark.parametrize("polygon", [[], [(0, 0)], [(0, 0), (1, 1)]])
    def test_degenerate_polygon_contains_nothing(self, polygon):
        assert is_point_in_polygon(0, 0, polygon) is False

    def test_closed_ring_same_as_open(self, unit_square):
        closed = unit_square + [unit_square[0]]
        assert is_point_in_polygon(0.5, 0.5, closed) is True

    def test_grid_polygon(self):
        assert is_point_in_polygon(530000, 180000, CENTRAL_LONDON_POLYGON) is True
        assert is_point_in_polygon(600000, 180000, CENTRAL_LONDON_POLYGON) is False


class TestConvexHull:
    _POINTS = [(0, 0), (10, 0), (10, 10), (0, 10), (5, 5), (3, 7), (5, 0)]

    def test_keeps_only_extremal_points(self):
        hull = convex_hull(self._POINTS)
        assert hull == [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]

    def test_encloses_interior_points(self):
        hull = convex_hull(self._POINTS)
        for x, y in [(5, 5), (3, 7)]:
            assert is_point_in_polygon(x, y, hull) is True

    def test_input_order_does_not_matter(self):
        assert convex_hull(list(reversed(self._POINTS))) == convex_hull(self._POINTS)

    @pytest.mark.parametrize("points", [[], [(1, 2)], [(1, 2), (3, 4)]])
    def test_fewer_than_three_points_returned(self, points):
        assert convex_hull(points) == points

    def test_short_input_keeps_point_type(self):
        points = [[1, 2], [3, 4]]
        hull = convex_hull(points)
        assert hull == [[1, 2], [3, 4]]
        assert hull is not points


class TestBufferPolygon:
    _CCW = [(0, 0), (1000, 0), (1000, 1000), (0, 1000)]
    _EXPECTED = [(-71, -71), (1071, -71), (1071, 1071), (-71, 1071), (-71, -71)]

    def test_counter_clockwise_grows(self):
        assert buffer_polygon(self._CCW, 100) == self._EXPECTED

    def test_clockwise_grows(self):
        clockwise = list(reversed(self._CCW))
        assert set(buffer_polygon(clockwise, 100)) == set(self._EXPECTED)

    def test_closed_input_ignores_repeated_vertex(self):
        closed = self._CCW + [self._CCW[0]]
        assert buffer_polygon(closed, 100) == self._EXPECTED

    def test_result_contains_original(self):
        buffered = buffer_polygon(self._CCW, 100)
        for x, y in self._CCW:
            assert is_point_in_polygon(x, y, buffered) is True

    def test_negative_distance_shrinks(self):
        shrunk = buffer_polygon(self._CCW, -100)
        assert shrunk[0] == (71, 71)
        assert is_point_in_polygon(500, 500, shrunk) is True

    def test_empty(self):
        assert buffer_polygon([], 100) == []


class TestCentroid:
    def test_mean(self):
        assert centroid([(0, 0), (2, 4)]) == (1, 2)

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            centroid([])


class TestDedupeConsecutive:
    def test_only_adjacent_duplicates_removed(self):
        points = [(1, 1), (1, 1), (2, 2), (1, 1)]
        assert dedupe_consecutive(points) == [(1, 1), (2, 2), (1, 1)]

    def test_lists_become_tuples(self):
        assert dedupe_consecutive([[1, 2], [1, 2]]) == [(1, 2)]
