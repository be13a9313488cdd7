"""Threat circle calculations - Pure functions.

DISCLAIMER: the threat circle formula is for illustration purposes only
and is not intended for safety-critical or predictive applications.
"""

import math

from quake_markers.core.earthquake import EventAttributes
from quake_markers.core.geo import PointOfInterest, calculate_distance


THREAT_BASE_MILES = 20.0
THREAT_GROWTH = 1.8
KM_PER_MILE = 1.6


def threat_radius_km(magnitude: float) -> float:
    """Return the threat circle radius for a magnitude.

    Pure function. Each unit of magnitude multiplies the radius by
    1.8 ** 2. Results too large for a float are returned as infinity.

    Args:
        magnitude: Event magnitude

    Returns:
        Radius in kilometers
    """
    try:
        miles = THREAT_BASE_MILES * THREAT_GROWTH ** (2 * magnitude - 5)
    except OverflowError:
        return math.inf
    return miles * KM_PER_MILE


def is_within_threat_circle(
    event: EventAttributes,
    latitude: float,
    longitude: float,
) -> bool:
    """Check if a point lies inside an event's threat circle.

    Pure function.

    Args:
        event: Event whose threat circle to use
        latitude: Point latitude
        longitude: Point longitude

    Returns:
        True if the point is within threat_radius_km of the epicenter
    """
    distance = calculate_distance(
        event.latitude,
        event.longitude,
        latitude,
        longitude,
    )
    return distance <= threat_radius_km(event.magnitude)


def affected_points(
    event: EventAttributes,
    points: list[PointOfInterest],
) -> list[PointOfInterest]:
    """Return the points that fall inside an event's threat circle.

    Pure function. Input order is preserved.
    """
    return [
        p for p in points
        if is_within_threat_circle(event, p.latitude, p.longitude)
    ]
