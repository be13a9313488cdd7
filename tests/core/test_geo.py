"""Unit tests for geographic calculations.

Pure function tests - no mocks needed.
"""

import pytest

from quake_markers.core.geo import BoundingBox, bounds_of, calculate_distance


class TestCalculateDistance:
    """Tests for calculate_distance() - Haversine formula."""

    def test_same_point_zero_distance(self):
        """Distance from a point to itself should be zero."""
        assert calculate_distance(37.7749, -122.4194, 37.7749, -122.4194) == 0

    def test_known_distance_sf_to_la(self):
        """SF to LA is approximately 559 km."""
        distance = calculate_distance(37.7749, -122.4194, 34.0522, -118.2437)
        assert 550 < distance < 570

    def test_one_degree_latitude(self):
        """One degree of latitude is about 111 km."""
        assert calculate_distance(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.19, rel=1e-3)

    def test_symmetric(self):
        """Distance A->B equals B->A."""
        d1 = calculate_distance(35.0, 139.0, -33.9, 151.2)
        d2 = calculate_distance(-33.9, 151.2, 35.0, 139.0)
        assert d1 == pytest.approx(d2)


class TestBoundingBox:
    """Tests for BoundingBox."""

    def test_center(self):
        box = BoundingBox(min_latitude=30, max_latitude=40, min_longitude=130, max_longitude=140)
        assert box.center == (35, 135)


class TestBoundsOf:
    """Tests for bounds_of()."""

    def test_empty(self):
        assert bounds_of([]) is None

    def test_single_point(self):
        box = bounds_of([(10.0, 20.0)])
        assert box == BoundingBox(10.0, 10.0, 20.0, 20.0)

    def test_several_points(self):
        box = bounds_of(iter([(10.0, 20.0), (-5.0, 40.0), (3.0, -7.0)]))
        assert box == BoundingBox(
            min_latitude=-5.0,
            max_latitude=10.0,
            min_longitude=-7.0,
            max_longitude=40.0,
        )
