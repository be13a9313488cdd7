"""Tests for static map client.

Uses mocked tile fetching to avoid network calls in tests.
"""

import pytest
from unittest.mock import patch, MagicMock

from PIL import Image
from staticmap import StaticMap
from staticmap.staticmap import _lat_to_y, _lon_to_x

from quake_markers.core.earthquake import AgeCategory, EventAttributes
from quake_markers.core.static_map import MapView
from quake_markers.shell.marker import marker_for
from quake_markers.shell.static_map_client import StaticMapClient, MapImageResult


def make_marker(magnitude: float, latitude: float, longitude: float, on_land: bool = True):
    return marker_for(EventAttributes(
        magnitude=magnitude,
        depth_km=20.0,
        age=AgeCategory.PAST_WEEK,
        title=f"M {magnitude}",
        latitude=latitude,
        longitude=longitude,
        is_on_land=on_land,
    ))


def fake_marker(magnitude: float, location: tuple[float, float]) -> MagicMock:
    marker = MagicMock()
    marker.magnitude = magnitude
    marker.location = location
    return marker


@pytest.fixture
def mock_map():
    """StaticMap replacement that renders a blank image."""
    with patch("quake_markers.shell.static_map_client.StaticMap") as mock_static_map_class:
        mock_map = MagicMock()
        mock_static_map_class.return_value = mock_map
        mock_map.render.return_value = Image.new("RGB", (400, 300), "white")
        yield mock_static_map_class, mock_map


@pytest.fixture
def fixed_projection():
    """Project every location to the image center."""
    with patch.object(StaticMapClient, "_to_pixels", return_value=(200, 150)) as mock_project:
        yield mock_project


class TestStaticMapClientInit:
    """Tests for StaticMapClient initialization."""

    def test_default_tile_url(self):
        """Default tile URL is OpenStreetMap."""
        client = StaticMapClient()
        assert "openstreetmap" in client.tile_url.lower()

    def test_custom_tile_url(self):
        """Custom tile URL is accepted."""
        custom_url = "https://tiles.example.com/{z}/{x}/{y}.png"
        client = StaticMapClient(tile_url=custom_url)
        assert client.tile_url == custom_url


class TestStaticMapClientRenderMarkers:
    """Tests for StaticMapClient.render_markers()."""

    def test_successful_render_returns_png(self, mock_map, fixed_projection):
        """Successful rendering returns PNG bytes."""
        client = StaticMapClient()
        result = client.render_markers(
            [make_marker(5.0, 35.0, 139.0), make_marker(6.0, 36.0, 140.0, on_land=False)],
            width=400,
            height=300,
        )

        assert result.success is True
        assert result.image_bytes.startswith(b"\x89PNG")
        assert result.error is None

    def test_markers_change_pixels(self, mock_map, fixed_projection):
        """Drawn markers actually color the base image."""
        _, static_map = mock_map

        client = StaticMapClient()
        client.render_markers([make_marker(5.0, 35.0, 139.0)], width=400, height=300)

        image = static_map.render.return_value
        assert image.getpixel((200, 150)) == (255, 255, 0)

    def test_negative_magnitude_still_renders(self, mock_map, fixed_projection):
        """Micro-quakes (magnitude below zero) do not fail the whole map."""
        client = StaticMapClient()
        result = client.render_markers(
            [make_marker(-0.5, 38.8, -122.8), make_marker(-1.2, 38.9, -122.7, on_land=False)],
            width=400,
            height=300,
        )

        assert result.success is True
        assert result.error is None

    def test_largest_drawn_last(self, mock_map, fixed_projection):
        """Markers are drawn smallest first so the largest is on top."""
        order = []
        markers = [
            fake_marker(5.0, (0.0, 0.0)),
            fake_marker(7.0, (1.0, 1.0)),
            fake_marker(3.0, (2.0, 2.0)),
        ]
        for m in markers:
            m.draw.side_effect = lambda surface, x, y, m=m: order.append(m.magnitude)

        client = StaticMapClient()
        client.render_markers(markers, width=400, height=300)

        assert order == [3.0, 5.0, 7.0]

    def test_renders_centered_on_markers(self, mock_map, fixed_projection):
        """Map is centered on the markers, in (lon, lat) order."""
        _, static_map = mock_map

        client = StaticMapClient()
        client.render_markers(
            [fake_marker(5.0, (30.0, 130.0)), fake_marker(4.0, (40.0, 140.0))],
            width=400,
            height=300,
            zoom=6,
        )

        static_map.render.assert_called_once_with(zoom=6, center=(135.0, 35.0))

    def test_uses_specified_dimensions(self, mock_map, fixed_projection):
        """Map uses the specified width and height."""
        mock_static_map_class, _ = mock_map

        client = StaticMapClient(tile_url="https://tiles.example.com/{z}/{x}/{y}.png")
        client.render_markers([fake_marker(5.0, (0.0, 0.0))], width=400, height=300)

        mock_static_map_class.assert_called_once_with(
            400,
            300,
            url_template="https://tiles.example.com/{z}/{x}/{y}.png",
        )

    def test_no_markers_returns_failure(self):
        """Nothing to render is reported, not raised."""
        result = StaticMapClient().render_markers([])

        assert result.success is False
        assert result.error == "No markers to render"

    @patch("quake_markers.shell.static_map_client.StaticMap")
    def test_exception_returns_failure(self, mock_static_map_class):
        """Exception during rendering returns failure result."""
        mock_static_map_class.return_value.render.side_effect = Exception("Network error")

        client = StaticMapClient()
        result = client.render_markers([fake_marker(5.0, (0.0, 0.0))])

        assert result.success is False
        assert result.image_bytes is None
        assert "Network error" in result.error


class TestProjection:
    """Tests for _to_pixels() against a real StaticMap, without fetching tiles."""

    @staticmethod
    def rendered_map(view: MapView) -> StaticMap:
        """StaticMap in the state render() leaves it in for this view."""
        static_map = StaticMap(view.width, view.height)
        static_map.zoom = view.zoom
        static_map.x_center = _lon_to_x(view.longitude, view.zoom)
        static_map.y_center = _lat_to_y(view.latitude, view.zoom)
        return static_map

    def test_view_center_maps_to_image_center(self):
        view = MapView(latitude=35.0, longitude=139.0, zoom=5, width=256, height=256)

        x, y = StaticMapClient()._to_pixels(self.rendered_map(view), view, 35.0, 139.0)

        assert (x, y) == (128, 128)

    def test_known_coordinate_at_world_zoom(self):
        """At zoom 0 one 256px tile spans the world; lon 90 is a quarter east."""
        view = MapView(latitude=0.0, longitude=0.0, zoom=0, width=256, height=256)
        client = StaticMapClient()
        static_map = self.rendered_map(view)

        assert client._to_pixels(static_map, view, 0.0, 90.0) == (192, 128)
        assert client._to_pixels(static_map, view, 0.0, -90.0) == (64, 128)

    def test_north_is_up(self):
        view = MapView(latitude=0.0, longitude=0.0, zoom=2, width=256, height=256)

        _, y = StaticMapClient()._to_pixels(self.rendered_map(view), view, 45.0, 0.0)

        assert y < 128


class TestMapImageResult:
    """Tests for MapImageResult dataclass."""

    def test_success_result(self):
        """Successful result has image bytes."""
        result = MapImageResult(
            success=True,
            image_bytes=b"PNG_DATA",
        )
        assert result.success is True
        assert result.image_bytes == b"PNG_DATA"
        assert result.error is None

    def test_failure_result(self):
        """Failure result has error message."""
        result = MapImageResult(
            success=False,
            error="Failed to fetch tiles",
        )
        assert result.success is False
        assert result.image_bytes is None
        assert result.error == "Failed to fetch tiles"
