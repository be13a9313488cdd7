"""Geographic calculations - Pure functions.

This module provides distance and extent calculations for event locations.
All functions are pure with no side effects.
"""

import math
from dataclasses import dataclass
from typing import Iterable


# Earth's radius in kilometers
EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class BoundingBox:
    """Geographic bounding box.

    Attributes:
        min_latitude: Southern boundary
        max_latitude: Northern boundary
        min_longitude: Western boundary
        max_longitude: Eastern boundary
    """
    min_latitude: float
    max_latitude: float
    min_longitude: float
    max_longitude: float

    @property
    def center(self) -> tuple[float, float]:
        """Return the (latitude, longitude) midpoint."""
        return (
            (self.min_latitude + self.max_latitude) / 2,
            (self.min_longitude + self.max_longitude) / 2,
        )


@dataclass(frozen=True)
class PointOfInterest:
    """A named location, e.g. a city checked against threat circles.

    Attributes:
        name: Human-readable name
        latitude: Location latitude
        longitude: Location longitude
    """
    name: str
    latitude: float
    longitude: float


def calculate_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> float:
    """Calculate distance between two points using Haversine formula.

    Pure function.

    Args:
        lat1: Latitude of first point
        lon1: Longitude of first point
        lat2: Latitude of second point
        lon2: Longitude of second point

    Returns:
        Distance in kilometers
    """
    # Convert to radians
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    # Haversine formula
    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def bounds_of(locations: Iterable[tuple[float, float]]) -> BoundingBox | None:
    """Smallest bounding box containing every (latitude, longitude) pair.

    Pure function.

    Returns:
        BoundingBox, or None for no locations
    """
    locations = list(locations)
    if not locations:
        return None

    latitudes = [lat for lat, _ in locations]
    longitudes = [lon for _, lon in locations]

    return BoundingBox(
        min_latitude=min(latitudes),
        max_latitude=max(latitudes),
        min_longitude=min(longitudes),
        max_longitude=max(longitudes),
    )
