# -*- coding: utf-8 -*-
"""
Tests for gmtk.core.geodesy — great-circle length, spherical area,
extents and label anchors.

Author
------
GMTK Contributors

Created
-------
2026-10-19
"""

import math

import pytest

from gmtk.core.geodesy import (
    EARTH_EQUATORIAL_RADIUS,
    EARTH_MEAN_RADIUS,
    bounding_box,
    haversine_distance,
    interior_point,
    path_length,
    point_in_ring,
    ring_area,
)


def _haversine(a, b, radius=EARTH_MEAN_RADIUS):
    lon1, lat1, lon2, lat2 = map(math.radians, (*a, *b))
    h = (
        math.sin((lat2 - lat1) / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin((lon2 - lon1) / 2) ** 2
    )
    return 2 * radius * math.asin(math.sqrt(h))


class TestPathLength:
    def test_fewer_than_two_vertices(self):
        assert path_length([]) == 0.0
        assert path_length([(100.0, 13.0)]) == 0.0

    def test_one_degree_on_equator(self):
        expected = math.radians(1.0) * EARTH_MEAN_RADIUS
        assert path_length([(0.0, 0.0), (1.0, 0.0)]) == pytest.approx(expected)

    def test_matches_scalar_haversine(self):
        a, b = (100.50, 13.70), (100.51, 13.70)
        assert haversine_distance(a, b) == pytest.approx(_haversine(a, b))

    def test_sums_segments(self):
        pts = [(100.0, 13.0), (100.1, 13.1), (100.3, 13.0)]
        expected = _haversine(pts[0], pts[1]) + _haversine(pts[1], pts[2])
        assert path_length(pts) == pytest.approx(expected)

    def test_close_to_ellipsoidal_distance(self):
        from pyproj import Geod

        a, b = (100.50, 13.70), (100.51, 13.70)
        _, _, ellipsoidal = Geod(ellps='WGS84').inv(a[0], a[1], b[0], b[1])
        assert path_length([a, b]) == pytest.approx(ellipsoidal, rel=0.01)

    def test_bad_shape_raises(self):
        with pytest.raises(ValueError):
            path_length([(1.0,), (2.0,)])


class TestRingArea:
    def test_small_equatorial_square(self):
        d = math.radians(0.01)
        expected = EARTH_EQUATORIAL_RADIUS ** 2 * d * math.sin(d)
        square = [(0.0, 0.0), (0.01, 0.0), (0.01, 0.01), (0.0, 0.01)]
        assert ring_area(square) == pytest.approx(expected, rel=1e-6)

    def test_orientation_independent(self):
        square = [(0.0, 0.0), (0.01, 0.0), (0.01, 0.01), (0.0, 0.01)]
        assert ring_area(square) == pytest.approx(ring_area(square[::-1]))

    def test_closed_ring_tolerated(self):
        square = [(0.0, 0.0), (0.01, 0.0), (0.01, 0.01), (0.0, 0.01)]
        assert ring_area(square + [square[0]]) == pytest.approx(ring_area(square))

    def test_degenerate(self):
        assert ring_area([]) == 0.0
        assert ring_area([(0.0, 0.0), (1.0, 0.0)]) == 0.0


class TestExtents:
    def test_bounding_box(self):
        pts = [(100.5, 13.7), (100.2, 13.9), (100.8, 13.6)]
        assert bounding_box(pts) == (100.2, 13.6, 100.8, 13.9)

    def test_point_in_ring(self):
        square = [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)]
        assert point_in_ring((1.0, 1.0), square)
        assert not point_in_ring((3.0, 1.0), square)

    def test_interior_point_convex(self):
        square = [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)]
        assert interior_point(square) == pytest.approx((1.0, 1.0))

    def test_interior_point_concave_falls_back_inside(self):
        # U shape whose vertex centroid lies in the notch
        ring = [
            (0.0, 0.0), (3.0, 0.0), (3.0, 3.0), (2.0, 3.0),
            (2.0, 0.5), (1.0, 0.5), (1.0, 3.0), (0.0, 3.0),
        ]
        lon, lat = interior_point(ring)
        assert (lon, lat) == (0.0, 0.0) or point_in_ring((lon, lat), ring)
