"""Render plans - Pure functions.

A RenderPlan describes everything needed to draw one marker for one
draw pass. The actual drawing (I/O) is handled by the shell layer.
"""

from dataclasses import dataclass

from quake_markers.core.classifier import (
    DepthBand,
    classify_depth,
    should_overlay_recency,
)
from quake_markers.core.earthquake import EventAttributes


@dataclass(frozen=True)
class RenderPlan:
    """Immutable description of how to draw a marker.

    Attributes:
        fill_color: Depth band, mapped to a concrete color when drawing
        visual_radius: Marker radius in pixels
        show_recency_overlay: Whether to draw the recency cross
        label_text: Title label, only set for a selected marker
    """
    fill_color: DepthBand
    visual_radius: float
    show_recency_overlay: bool
    label_text: str | None = None


def format_label(title: str, depth_km: float) -> str:
    """Format the label shown next to a selected marker.

    Pure function.

    Args:
        title: Event title
        depth_km: Event depth in kilometers

    Returns:
        Label such as "M 5.2 - Region X, depth: 10.3 km."
    """
    return f"{title}, depth: {depth_km} km."


def build_render_plan(
    attrs: EventAttributes,
    visual_radius: float,
    selected: bool = False,
) -> RenderPlan:
    """Build the render plan for an event.

    Pure function. The visual radius is the value cached on the marker at
    construction and is passed through unchanged.

    Args:
        attrs: Event attributes
        visual_radius: Precomputed marker radius in pixels
        selected: Whether the marker is currently selected

    Returns:
        RenderPlan for one draw pass
    """
    label_text = None
    if selected:
        label_text = format_label(attrs.title, attrs.depth_km)

    return RenderPlan(
        fill_color=classify_depth(attrs.depth_km),
        visual_radius=visual_radius,
        show_recency_overlay=should_overlay_recency(attrs.age),
        label_text=label_text,
    )
