"""Marker classification - Pure functions.

Maps event attributes to visual categories: depth band (fill color),
magnitude class and radius (size), and age (recency overlay).
"""

from enum import Enum

from quake_markers.core.earthquake import AgeCategory


# Greater than or equal to this depth (km) is an intermediate-depth event
THRESHOLD_INTERMEDIATE = 70.0
# Greater than or equal to this depth (km) is a deep event
THRESHOLD_DEEP = 300.0

# Greater than or equal to this magnitude is a moderate earthquake
THRESHOLD_MODERATE = 5.0
# Greater than or equal to this magnitude is a light earthquake
THRESHOLD_LIGHT = 4.0

# Marker radius in pixels per unit of magnitude
VISUAL_RADIUS_FACTOR = 1.75

RECENT_AGES = frozenset({AgeCategory.PAST_HOUR, AgeCategory.PAST_DAY})


class DepthBand(Enum):
    """Depth band of an event, mapped to a fill color when drawing."""
    SHALLOW = "shallow"
    INTERMEDIATE = "intermediate"
    DEEP = "deep"


class MagnitudeClass(Enum):
    """Coarse magnitude class of an event."""
    MINOR = "minor"
    LIGHT = "light"
    MODERATE = "moderate"


def classify_depth(depth_km: float) -> DepthBand:
    """Classify an event depth into a depth band.

    Pure function. Each band includes its lower bound; negative depths
    are SHALLOW.

    Args:
        depth_km: Depth in kilometers

    Returns:
        DepthBand for the depth
    """
    if depth_km < THRESHOLD_INTERMEDIATE:
        return DepthBand.SHALLOW
    elif depth_km < THRESHOLD_DEEP:
        return DepthBand.INTERMEDIATE
    return DepthBand.DEEP


def classify_magnitude(magnitude: float) -> MagnitudeClass:
    """Classify a magnitude as minor, light or moderate.

    Pure function.
    """
    if magnitude < THRESHOLD_LIGHT:
        return MagnitudeClass.MINOR
    elif magnitude < THRESHOLD_MODERATE:
        return MagnitudeClass.LIGHT
    return MagnitudeClass.MODERATE


def should_overlay_recency(age: AgeCategory) -> bool:
    """Return True if the event is recent enough to get the cross overlay.

    Only PAST_HOUR and PAST_DAY qualify.
    """
    return age in RECENT_AGES


def marker_radius(magnitude: float) -> float:
    """Visual marker radius in pixels for a magnitude."""
    return VISUAL_RADIUS_FACTOR * magnitude
