"""Earthquake Markers - Imperative Shell.

Markers wrap EventAttributes and issue draw calls on a DrawingSurface.
All visual decisions come from the core's RenderPlan; this module only
turns a plan into draw calls.
"""

from abc import ABC, abstractmethod

from quake_markers.core.classifier import marker_radius
from quake_markers.core.config import StyleConfig
from quake_markers.core.earthquake import AgeCategory, EventAttributes
from quake_markers.core.ordering import compare_magnitude
from quake_markers.core.render_plan import RenderPlan, build_render_plan
from quake_markers.core.threat import threat_radius_km
from quake_markers.shell.surface import DrawingSurface, style_scope


class EarthquakeMarker(ABC):
    """Base class for a drawable earthquake marker.

    Subclasses supply the shape via draw_shape(); color, recency overlay
    and style save/restore are handled here.

    Attributes:
        attributes: Event attributes, fixed for the marker's lifetime
        radius: Visual radius in pixels, computed once from the magnitude
        selected: Selection state, set by whoever handles input
        style: Concrete colors and overlay geometry
    """

    def __init__(
        self,
        attributes: EventAttributes,
        style: StyleConfig | None = None,
    ) -> None:
        self.attributes = attributes
        self.radius = marker_radius(attributes.magnitude)
        self.selected = False
        self.style = style or StyleConfig()

    @property
    def magnitude(self) -> float:
        return self.attributes.magnitude

    @property
    def depth_km(self) -> float:
        return self.attributes.depth_km

    @property
    def title(self) -> str:
        return self.attributes.title

    @property
    def age(self) -> AgeCategory:
        return self.attributes.age

    @property
    def location(self) -> tuple[float, float]:
        return self.attributes.location

    @property
    def is_on_land(self) -> bool:
        return self.attributes.is_on_land

    def threat_radius_km(self) -> float:
        """Radius of this event's threat circle in kilometers."""
        return threat_radius_km(self.magnitude)

    def render_plan(self) -> RenderPlan:
        """Build the render plan for the current selection state."""
        return build_render_plan(self.attributes, self.radius, self.selected)

    @abstractmethod
    def draw_shape(self, surface: DrawingSurface, x: float, y: float) -> None:
        """Draw the marker outline using the current fill color."""

    def draw_marker(self, surface: DrawingSurface, x: float, y: float) -> None:
        """Draw the marker at pixel position (x, y).

        The surface style is restored afterwards, even if drawing fails.
        """
        plan = self.render_plan()

        with style_scope(surface):
            surface.fill(self.style.color_for(plan.fill_color))
            self.draw_shape(surface, x, y)

            if plan.show_recency_overlay:
                self._draw_cross(surface, x, y, plan.visual_radius)

    def _draw_cross(
        self,
        surface: DrawingSurface,
        x: float,
        y: float,
        radius: float,
    ) -> None:
        arm = radius + self.style.overlay_buffer_px

        with style_scope(surface):
            surface.stroke_weight(self.style.overlay_stroke_weight)
            surface.line(x - arm, y - arm, x + arm, y + arm)
            surface.line(x - arm, y + arm, x + arm, y - arm)

    def show_title(self, surface: DrawingSurface, x: float, y: float) -> None:
        """Draw the title box next to the marker if it is selected."""
        plan = self.render_plan()
        if plan.label_text is None:
            return

        style = self.style
        box_x = x + style.label_offset_px
        box_y = y + style.label_offset_px

        with style_scope(surface):
            surface.stroke((style.label_stroke_gray,) * 3)
            surface.fill((style.label_fill_gray,) * 3)
            surface.rect(
                box_x,
                box_y,
                surface.text_width(plan.label_text) + style.label_padding_px,
                style.label_height_px,
            )
            surface.fill((style.label_text_gray,) * 3)
            surface.text(plan.label_text, box_x, box_y)

    def draw(self, surface: DrawingSurface, x: float, y: float) -> None:
        """Draw the marker and, when selected, its title."""
        self.draw_marker(surface, x, y)
        if self.selected:
            self.show_title(surface, x, y)

    def __lt__(self, other: "EarthquakeMarker") -> bool:
        # Larger magnitude sorts first
        return compare_magnitude(self, other) < 0

    def __str__(self) -> str:
        return self.title

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(magnitude={self.magnitude}, "
            f"depth_km={self.depth_km}, title={self.title!r})"
        )


class LandQuakeMarker(EarthquakeMarker):
    """Marker for an event on land, drawn as a circle."""

    def draw_shape(self, surface: DrawingSurface, x: float, y: float) -> None:
        surface.ellipse(x, y, 2 * self.radius, 2 * self.radius)


class OceanQuakeMarker(EarthquakeMarker):
    """Marker for an event at sea, drawn as a square."""

    def draw_shape(self, surface: DrawingSurface, x: float, y: float) -> None:
        surface.rect(x - self.radius, y - self.radius, 2 * self.radius, 2 * self.radius)


def marker_for(
    attributes: EventAttributes,
    style: StyleConfig | None = None,
) -> EarthquakeMarker:
    """Create the marker variant matching the event's land/ocean flag."""
    if attributes.is_on_land:
        return LandQuakeMarker(attributes, style)
    return OceanQuakeMarker(attributes, style)
