"""Orchestrator - Wires Functional Core and Imperative Shell.

This module coordinates the flow of data between the pure functional
core and the drawing shell: feed features become markers, markers are
ordered, and the map image is rendered.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable

from quake_markers.core.config import Config
from quake_markers.core.earthquake import (
    MissingAttributeError,
    event_attributes_from_properties,
    event_properties_from_feature,
)
from quake_markers.core.ordering import sort_by_magnitude
from quake_markers.shell.marker import EarthquakeMarker, marker_for
from quake_markers.shell.static_map_client import MapImageResult, StaticMapClient


logger = logging.getLogger(__name__)


LandLookup = Callable[[float, float], bool]


@dataclass
class RenderResult:
    """Result of a complete map rendering run.

    Attributes:
        markers: Markers built from the feed, largest magnitude first
        skipped: Descriptions of features that could not become markers
        image: Rendered map image result
    """
    markers: list[EarthquakeMarker]
    skipped: list[str] = field(default_factory=list)
    image: MapImageResult | None = None

    @property
    def success(self) -> bool:
        """Returns True if the image was rendered."""
        return self.image is not None and self.image.success

    @property
    def summary(self) -> str:
        """Human-readable summary of the rendering result."""
        return (
            f"Built {len(self.markers)} markers, "
            f"{len(self.skipped)} skipped, "
            f"image {'rendered' if self.success else 'not rendered'}"
        )


class Orchestrator:
    """Coordinates marker construction and map rendering.

    This class wires together:
    - Core functions (attribute parsing, classification, ordering)
    - Marker classes (drawing glue)
    - Static map client (tile fetching and image output)
    """

    def __init__(
        self,
        config: Config,
        static_map_client: StaticMapClient | None = None,
        land_lookup: LandLookup | None = None,
    ) -> None:
        """Initialize orchestrator with configuration.

        Args:
            config: Application configuration
            static_map_client: Static map client (created if not provided)
            land_lookup: Decides whether a (lat, lon) is on land.
                         Without one, every event is treated as oceanic.
        """
        self.config = config
        self.static_map_client = static_map_client or StaticMapClient(
            tile_url=config.map.tile_url,
        )
        self.land_lookup = land_lookup

    def build_markers(
        self,
        geojson: dict[str, Any],
        now: datetime | None = None,
    ) -> tuple[list[EarthquakeMarker], list[str]]:
        """Build markers from a GeoJSON FeatureCollection.

        Features with missing or malformed attributes are skipped and
        reported, not raised.

        Args:
            geojson: Parsed GeoJSON FeatureCollection
            now: Reference time for age buckets (defaults to current UTC time)

        Returns:
            Tuple of (markers largest first, skipped feature descriptions)
        """
        if now is None:
            now = datetime.now(timezone.utc)

        markers: list[EarthquakeMarker] = []
        skipped: list[str] = []

        for index, feature in enumerate(geojson.get("features", [])):
            feature_id = feature.get("id") or f"#{index}"
            try:
                properties, location = event_properties_from_feature(feature, now)
                on_land = self.land_lookup(*location) if self.land_lookup else False
                attributes = event_attributes_from_properties(
                    properties,
                    location,
                    is_on_land=on_land,
                )
            except MissingAttributeError as e:
                logger.warning("Skipping feature %s: %s", feature_id, e)
                skipped.append(f"{feature_id}: {e}")
                continue

            markers.append(marker_for(attributes, self.config.style))

        logger.info(
            "Built %d markers (%d skipped)",
            len(markers),
            len(skipped),
        )

        return sort_by_magnitude(markers), skipped

    def run(
        self,
        geojson: dict[str, Any],
        now: datetime | None = None,
    ) -> RenderResult:
        """Build markers from a feed and render them on a map.

        Args:
            geojson: Parsed GeoJSON FeatureCollection
            now: Reference time for age buckets

        Returns:
            RenderResult with markers, skipped features and the image
        """
        markers, skipped = self.build_markers(geojson, now)
        result = RenderResult(markers=markers, skipped=skipped)

        if not markers:
            logger.warning("No markers to render")
            return result

        result.image = self.static_map_client.render_markers(
            markers,
            width=self.config.map.width,
            height=self.config.map.height,
            zoom=self.config.map.zoom,
        )

        if not result.image.success:
            logger.error("Map rendering failed: %s", result.image.error)

        return result
