"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field

from quake_markers.core.classifier import DepthBand
from quake_markers.core.static_map import MAX_ZOOM, MIN_ZOOM


Color = tuple[int, int, int]


@dataclass(frozen=True)
class StyleConfig:
    """Marker appearance settings.

    Attributes:
        shallow_color: Fill for shallow events (yellow)
        intermediate_color: Fill for intermediate-depth events (blue)
        deep_color: Fill for deep events (red)
        overlay_buffer_px: How far the recency cross reaches past the marker
        overlay_stroke_weight: Line width of the recency cross
        label_offset_px: Offset of the title box from the marker center
        label_height_px: Height of the title box
        label_padding_px: Extra width added to the title text
        label_stroke_gray: Gray level of the title box border
        label_fill_gray: Gray level of the title box background
        label_text_gray: Gray level of the title text
    """
    shallow_color: Color = (255, 255, 0)
    intermediate_color: Color = (0, 0, 255)
    deep_color: Color = (255, 0, 0)
    overlay_buffer_px: float = 2
    overlay_stroke_weight: float = 2
    label_offset_px: float = 18
    label_height_px: float = 18
    label_padding_px: float = 6
    label_stroke_gray: int = 110
    label_fill_gray: int = 240
    label_text_gray: int = 0

    def color_for(self, band: DepthBand) -> Color:
        """Return the concrete fill color for a depth band."""
        if band is DepthBand.SHALLOW:
            return self.shallow_color
        elif band is DepthBand.INTERMEDIATE:
            return self.intermediate_color
        return self.deep_color


@dataclass(frozen=True)
class MapConfig:
    """Static map image settings.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        zoom: Fixed zoom level, None to fit the events
        tile_url: Tile server URL template
    """
    width: int = 800
    height: int = 600
    zoom: int | None = None
    tile_url: str = "https://tile.openstreetmap.org/{z}/{x}/{y}.png"


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        style: Marker appearance settings
        map: Static map settings
    """
    style: StyleConfig = field(default_factory=StyleConfig)
    map: MapConfig = field(default_factory=MapConfig)


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_color(color: Color, field_name: str) -> list[ValidationError]:
    """Validate an (r, g, b) color.

    Pure function.

    Args:
        color: Color tuple
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    if len(color) != 3:
        return [ValidationError(
            field=field_name,
            message=f"Color must have 3 components, got {len(color)}",
        )]

    errors = []
    for component in color:
        if not 0 <= component <= 255:
            errors.append(ValidationError(
                field=field_name,
                message=f"Color component {component} out of range [0, 255]",
            ))
    return errors


def validate_style(style: StyleConfig) -> list[ValidationError]:
    """Validate marker style settings.

    Pure function.
    """
    errors = []

    for name in ("shallow_color", "intermediate_color", "deep_color"):
        errors.extend(validate_color(getattr(style, name), f"style.{name}"))

    for name in ("overlay_stroke_weight", "label_height_px"):
        value = getattr(style, name)
        if value <= 0:
            errors.append(ValidationError(
                field=f"style.{name}",
                message=f"Must be positive, got {value}",
            ))

    for name in ("label_stroke_gray", "label_fill_gray", "label_text_gray"):
        value = getattr(style, name)
        if not 0 <= value <= 255:
            errors.append(ValidationError(
                field=f"style.{name}",
                message=f"Gray level {value} out of range [0, 255]",
            ))

    # Same fill for two bands makes them indistinguishable
    colors = [style.shallow_color, style.intermediate_color, style.deep_color]
    if len(set(colors)) < len(colors):
        errors.append(ValidationError(
            field="style",
            message="Depth band colors are not distinct",
            severity="warning",
        ))

    return errors


def validate_map(map_config: MapConfig) -> list[ValidationError]:
    """Validate static map settings.

    Pure function.
    """
    errors = []

    if map_config.width <= 0 or map_config.height <= 0:
        errors.append(ValidationError(
            field="map",
            message=f"Image size must be positive, got {map_config.width}x{map_config.height}",
        ))

    if map_config.zoom is not None and not MIN_ZOOM <= map_config.zoom <= MAX_ZOOM:
        errors.append(ValidationError(
            field="map.zoom",
            message=f"Zoom {map_config.zoom} out of range [{MIN_ZOOM}, {MAX_ZOOM}]",
        ))

    if "{z}" not in map_config.tile_url:
        errors.append(ValidationError(
            field="map.tile_url",
            message="Tile URL has no {z}/{x}/{y} placeholders",
            severity="warning",
        ))

    return errors


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []
    errors.extend(validate_style(config.style))
    errors.extend(validate_map(config.map))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
