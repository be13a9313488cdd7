"""Static Map Client - Imperative Shell.

This module renders earthquake markers on an OpenStreetMap base image.
All I/O is contained here; map view and marker decisions are in the core.
"""

import io
import logging
from dataclasses import dataclass
from typing import Sequence

from staticmap import StaticMap
from staticmap.staticmap import _lat_to_y, _lon_to_x

from quake_markers.core.geo import bounds_of
from quake_markers.core.ordering import sort_by_magnitude
from quake_markers.core.static_map import MapView, create_map_view
from quake_markers.shell.marker import EarthquakeMarker
from quake_markers.shell.pillow_surface import PillowSurface


logger = logging.getLogger(__name__)


@dataclass
class MapImageResult:
    """Result of map image generation.

    Attributes:
        success: Whether the image was generated successfully
        image_bytes: PNG image data if successful
        error: Error message if failed
    """
    success: bool
    image_bytes: bytes | None = None
    error: str | None = None


class StaticMapClient:
    """Client for rendering marker maps.

    This is part of the imperative shell - it handles I/O (fetching map tiles
    and rendering images).
    """

    def __init__(self, tile_url: str | None = None) -> None:
        """Initialize static map client.

        Args:
            tile_url: Custom tile URL template. Defaults to OpenStreetMap.
        """
        # Default to OpenStreetMap tiles
        self.tile_url = tile_url or "https://tile.openstreetmap.org/{z}/{x}/{y}.png"

    def render_markers(
        self,
        markers: Sequence[EarthquakeMarker],
        width: int = 800,
        height: int = 600,
        zoom: int | None = None,
    ) -> MapImageResult:
        """Render a map image with every marker drawn on it.

        This method performs I/O (fetches map tiles from tile server).
        Markers are drawn smallest first so the largest end up on top.

        Args:
            markers: Markers to draw
            width: Image width in pixels
            height: Image height in pixels
            zoom: Fixed zoom level, or None to fit the markers

        Returns:
            MapImageResult with image bytes or error
        """
        bounds = bounds_of(m.location for m in markers)
        if bounds is None:
            return MapImageResult(success=False, error="No markers to render")

        view = create_map_view(bounds, width, height, zoom)

        logger.info(
            "Rendering %d markers centered on (%.4f, %.4f) at zoom %d",
            len(markers),
            view.latitude,
            view.longitude,
            view.zoom,
        )

        try:
            static_map = StaticMap(
                view.width,
                view.height,
                url_template=self.tile_url,
            )
            # staticmap takes (lon, lat) order
            image = static_map.render(
                zoom=view.zoom,
                center=(view.longitude, view.latitude),
            )

            surface = PillowSurface(image)
            for marker in reversed(sort_by_magnitude(markers)):
                x, y = self._to_pixels(static_map, view, *marker.location)
                marker.draw(surface, x, y)

            buffer = io.BytesIO()
            image.save(buffer, format="PNG")
            image_bytes = buffer.getvalue()

            logger.info(
                "Generated map image: %d bytes",
                len(image_bytes),
            )

            return MapImageResult(
                success=True,
                image_bytes=image_bytes,
            )

        except Exception as e:
            logger.error("Failed to render map: %s", str(e))
            return MapImageResult(
                success=False,
                error=str(e),
            )

    def _to_pixels(
        self,
        static_map: StaticMap,
        view: MapView,
        latitude: float,
        longitude: float,
    ) -> tuple[float, float]:
        """Project a location to pixel coordinates on the rendered map.

        Uses staticmap's own Web Mercator helpers; only valid after render().
        """
        x = static_map._x_to_px(_lon_to_x(longitude, view.zoom))
        y = static_map._y_to_px(_lat_to_y(latitude, view.zoom))
        return x, y
