"""Functional Core - Pure functions with no side effects.

This module contains all marker logic as pure functions:
- Event attribute parsing
- Depth/magnitude/age classification
- Threat circle calculations
- Magnitude ordering
- Render plan assembly

All functions here are deterministic and have no I/O.
"""

from quake_markers.core.earthquake import (
    AgeCategory,
    EventAttributes,
    MissingAttributeError,
    event_attributes_from_properties,
)
from quake_markers.core.classifier import (
    DepthBand,
    classify_depth,
    marker_radius,
    should_overlay_recency,
)
from quake_markers.core.threat import threat_radius_km
from quake_markers.core.ordering import compare_magnitude, sort_by_magnitude
from quake_markers.core.render_plan import RenderPlan, build_render_plan, format_label

__all__ = [
    # Event attributes
    "AgeCategory",
    "EventAttributes",
    "MissingAttributeError",
    "event_attributes_from_properties",
    # Classifier
    "DepthBand",
    "classify_depth",
    "marker_radius",
    "should_overlay_recency",
    # Threat circle
    "threat_radius_km",
    # Ordering
    "compare_magnitude",
    "sort_by_magnitude",
    # Render plan
    "RenderPlan",
    "build_render_plan",
    "format_label",
]
