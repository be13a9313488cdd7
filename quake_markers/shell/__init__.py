"""Imperative Shell - I/O and drawing.

This module contains everything that touches pixels or files:
- Drawing surface interface and Pillow implementation
- Earthquake marker drawing
- Static map rendering
- Configuration loading
"""

from quake_markers.shell.surface import DrawingSurface, style_scope
from quake_markers.shell.marker import (
    EarthquakeMarker,
    LandQuakeMarker,
    OceanQuakeMarker,
    marker_for,
)
from quake_markers.shell.pillow_surface import PillowSurface, StyleStackError
from quake_markers.shell.static_map_client import MapImageResult, StaticMapClient
from quake_markers.shell.config_loader import load_config, load_config_from_dict

__all__ = [
    "DrawingSurface",
    "style_scope",
    "EarthquakeMarker",
    "LandQuakeMarker",
    "OceanQuakeMarker",
    "marker_for",
    "PillowSurface",
    "StyleStackError",
    "MapImageResult",
    "StaticMapClient",
    "load_config",
    "load_config_from_dict",
]
