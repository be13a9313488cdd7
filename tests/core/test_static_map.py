"""Tests for static map view - Pure functions.

These are fast unit tests with no mocks needed since they test pure functions.
"""

from quake_markers.core.geo import BoundingBox
from quake_markers.core.static_map import MapView, create_map_view, get_zoom_level


def box(lat_span: float, lon_span: float) -> BoundingBox:
    return BoundingBox(
        min_latitude=0.0,
        max_latitude=lat_span,
        min_longitude=0.0,
        max_longitude=lon_span,
    )


class TestGetZoomLevel:
    """Tests for get_zoom_level()."""

    def test_global_spread_zooms_out(self):
        assert get_zoom_level(box(100, 300)) == 1

    def test_regional_spread(self):
        assert get_zoom_level(box(12, 8)) == 4

    def test_single_point_zooms_in(self):
        assert get_zoom_level(box(0, 0)) == 8

    def test_widest_axis_wins(self):
        """Longitude span decides when it is wider."""
        assert get_zoom_level(box(1, 50)) == 2

    def test_wider_never_zooms_in(self):
        spans = [0, 0.5, 1, 3, 7, 15, 30, 60, 120, 360]
        zooms = [get_zoom_level(box(s, s)) for s in spans]
        assert zooms == sorted(zooms, reverse=True)


class TestCreateMapView:
    """Tests for create_map_view()."""

    def test_centered_on_bounds(self):
        view = create_map_view(BoundingBox(30, 40, 130, 140), 800, 600)

        assert view == MapView(
            latitude=35,
            longitude=135,
            zoom=4,
            width=800,
            height=600,
        )

    def test_fixed_zoom(self):
        view = create_map_view(box(0, 0), 400, 300, zoom=12)
        assert view.zoom == 12

    def test_zoom_is_clamped(self):
        assert create_map_view(box(0, 0), 400, 300, zoom=25).zoom == 18
        assert create_map_view(box(0, 0), 400, 300, zoom=-1).zoom == 0
