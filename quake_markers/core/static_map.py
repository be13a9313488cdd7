"""Static map view - Pure functions.

This module decides where a static map is centered and how far it is
zoomed for a set of events. The actual image generation (I/O) is handled
by the shell layer.
"""

from dataclasses import dataclass

from quake_markers.core.geo import BoundingBox


MIN_ZOOM = 0
MAX_ZOOM = 18


@dataclass(frozen=True)
class MapView:
    """Immutable view parameters for one static map image.

    Attributes:
        latitude: Center latitude
        longitude: Center longitude
        zoom: Zoom level (0-18)
        width: Image width in pixels
        height: Image height in pixels
    """
    latitude: float
    longitude: float
    zoom: int
    width: int
    height: int


def get_zoom_level(bounds: BoundingBox) -> int:
    """Determine a zoom level that fits a bounding box.

    Pure function. Wider spreads of events get zoomed out further.

    Args:
        bounds: Extent of the events to show

    Returns:
        Zoom level (1-8)
    """
    span = max(
        bounds.max_latitude - bounds.min_latitude,
        bounds.max_longitude - bounds.min_longitude,
    )

    if span >= 90:
        return 1  # Whole world
    elif span >= 45:
        return 2
    elif span >= 20:
        return 3
    elif span >= 10:
        return 4
    elif span >= 5:
        return 5
    elif span >= 2:
        return 6
    elif span >= 1:
        return 7
    return 8  # Single event or a tight cluster


def create_map_view(
    bounds: BoundingBox,
    width: int,
    height: int,
    zoom: int | None = None,
) -> MapView:
    """Create the view for a map showing every event in `bounds`.

    Pure function.

    Args:
        bounds: Extent of the events to show
        width: Image width in pixels
        height: Image height in pixels
        zoom: Fixed zoom level, or None to fit the bounds

    Returns:
        MapView centered on the bounds
    """
    latitude, longitude = bounds.center

    if zoom is None:
        zoom = get_zoom_level(bounds)

    return MapView(
        latitude=latitude,
        longitude=longitude,
        zoom=max(MIN_ZOOM, min(zoom, MAX_ZOOM)),
        width=width,
        height=height,
    )
