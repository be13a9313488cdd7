"""Earthquake event attributes - Pure functions.

This module turns the loosely typed property mapping carried by a feed
record into an immutable EventAttributes snapshot. All functions are pure
with no side effects.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Mapping


class MissingAttributeError(ValueError):
    """A required marker property is absent or not numeric.

    Attributes:
        key: Name of the offending property
    """

    def __init__(self, key: str, message: str | None = None) -> None:
        self.key = key
        super().__init__(message or f"Missing required property '{key}'")


class AgeCategory(Enum):
    """How long ago an event happened, as bucketed by the feed."""
    PAST_HOUR = "past_hour"
    PAST_DAY = "past_day"
    PAST_WEEK = "past_week"
    OLDER = "older"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class EventAttributes:
    """Immutable snapshot of one earthquake event.

    Attributes:
        magnitude: Event magnitude
        depth_km: Hypocenter depth in kilometers (may be <= 0 near surface)
        age: Age bucket of the event
        title: Feed title (e.g., "M 5.2 - 10km NE of Somewhere")
        latitude: Epicenter latitude
        longitude: Epicenter longitude
        is_on_land: Whether the epicenter is on land (decided by the caller)
        event_id: Feed event ID, if known
    """
    magnitude: float
    depth_km: float
    age: AgeCategory
    title: str
    latitude: float
    longitude: float
    is_on_land: bool = False
    event_id: str = ""

    @property
    def location(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)


# Checked in order; "past day" must not shadow "past hour".
_AGE_PHRASES = (
    ("past hour", AgeCategory.PAST_HOUR),
    ("past day", AgeCategory.PAST_DAY),
    ("past week", AgeCategory.PAST_WEEK),
    ("past month", AgeCategory.OLDER),
    ("past 30 days", AgeCategory.OLDER),
    ("older", AgeCategory.OLDER),
)


def parse_age_category(text: str | None) -> AgeCategory:
    """Map feed age text such as "Past Hour" to an AgeCategory.

    Pure function. Matching is a case-insensitive substring search.

    Args:
        text: Age text from the feed

    Returns:
        Matching AgeCategory, UNKNOWN when nothing matches
    """
    if not text:
        return AgeCategory.UNKNOWN

    lowered = str(text).lower()
    for phrase, category in _AGE_PHRASES:
        if phrase in lowered:
            return category

    return AgeCategory.UNKNOWN


def age_category_from_time(event_time: datetime, now: datetime) -> AgeCategory:
    """Bucket an event timestamp relative to now.

    Pure function. Events stamped after `now` count as PAST_HOUR.

    Args:
        event_time: When the event happened
        now: Reference time

    Returns:
        AgeCategory for the elapsed time
    """
    elapsed = now - event_time

    if elapsed <= timedelta(hours=1):
        return AgeCategory.PAST_HOUR
    elif elapsed <= timedelta(days=1):
        return AgeCategory.PAST_DAY
    elif elapsed <= timedelta(days=7):
        return AgeCategory.PAST_WEEK
    return AgeCategory.OLDER


def _require(properties: Mapping[str, Any], key: str) -> Any:
    if key not in properties or properties[key] is None:
        raise MissingAttributeError(key)
    return properties[key]


def _parse_number(raw: Any, key: str) -> float:
    try:
        value = float(str(raw).strip())
    except ValueError:
        raise MissingAttributeError(key, f"Property '{key}' is not numeric: {raw!r}") from None

    if not math.isfinite(value):
        raise MissingAttributeError(key, f"Property '{key}' is not finite: {raw!r}")
    return value


def _require_number(properties: Mapping[str, Any], key: str) -> float:
    return _parse_number(_require(properties, key), key)


def event_attributes_from_properties(
    properties: Mapping[str, Any],
    location: tuple[float, float],
    is_on_land: bool = False,
) -> EventAttributes:
    """Build EventAttributes from a generic feed property mapping.

    Pure function. Fails fast: no partial object is created when a
    required property is missing or malformed.

    Args:
        properties: Mapping with 'magnitude', 'depth', 'age', 'title'
                    (and optionally 'id'); numbers may be strings
        location: (latitude, longitude) of the epicenter
        is_on_land: Land/ocean flag from the caller's lookup

    Returns:
        EventAttributes snapshot

    Raises:
        MissingAttributeError: If a required property is absent or non-numeric
    """
    magnitude = _require_number(properties, "magnitude")
    depth_km = _require_number(properties, "depth")
    age = _require(properties, "age")
    title = _require(properties, "title")

    if not isinstance(age, AgeCategory):
        age = parse_age_category(str(age))

    latitude, longitude = location

    return EventAttributes(
        magnitude=magnitude,
        depth_km=depth_km,
        age=age,
        title=str(title),
        latitude=_parse_number(latitude, "location"),
        longitude=_parse_number(longitude, "location"),
        is_on_land=bool(is_on_land),
        event_id=str(properties.get("id") or ""),
    )


def event_properties_from_feature(
    feature: dict[str, Any],
    now: datetime | None = None,
) -> tuple[dict[str, Any], tuple[float, float]]:
    """Map a USGS GeoJSON feature to a marker property mapping.

    Pure function (given `now`). Absent fields are left out of the
    mapping so that event_attributes_from_properties reports them.

    Args:
        feature: GeoJSON feature dict from a USGS feed
        now: Reference time for the age bucket (defaults to current UTC time)

    Returns:
        Tuple of (properties, (latitude, longitude))

    Raises:
        MissingAttributeError: If the coordinates are missing or non-numeric,
                               or the time is not a usable timestamp
    """
    props = feature.get("properties") or {}
    geometry = feature.get("geometry") or {}
    coords = geometry.get("coordinates") or []

    properties: dict[str, Any] = {"id": feature.get("id", "")}

    if props.get("mag") is not None:
        properties["magnitude"] = props["mag"]

    if len(coords) >= 3 and coords[2] is not None:
        properties["depth"] = coords[2]

    title = props.get("title") or props.get("place")
    if title:
        properties["title"] = title

    # USGS uses milliseconds since epoch
    time_ms = props.get("time")
    if time_ms is not None:
        if now is None:
            now = datetime.now(timezone.utc)
        seconds = _parse_number(time_ms, "time") / 1000
        try:
            event_time = datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise MissingAttributeError(
                "time", f"Property 'time' is out of range: {time_ms!r}"
            ) from None
        properties["age"] = age_category_from_time(event_time, now)
    else:
        properties["age"] = AgeCategory.UNKNOWN

    if len(coords) < 2:
        raise MissingAttributeError("location", "Feature has no epicenter coordinates")

    latitude = _parse_number(coords[1], "location")
    longitude = _parse_number(coords[0], "location")

    return properties, (latitude, longitude)
