#!/usr/bin/env python3
"""Render earthquake markers from a local GeoJSON file to a PNG map.

Reads a USGS GeoJSON FeatureCollection that was saved to disk (this script
never downloads feeds), builds markers, lists the largest events and
renders them on an OpenStreetMap base image.

Usage:
    python scripts/render_map.py all_week.geojson quakes.png

    # Fixed zoom, bigger image, list the 5 largest events
    python scripts/render_map.py all_week.geojson quakes.png --zoom 3 --width 1200 --top 5

    # Report which cities fall inside the threat circles of listed events
    python scripts/render_map.py all_week.geojson quakes.png --city "Tokyo,35.68,139.69"

Environment:
    CONFIG_PATH: Path to config file (default: config/config.yaml)
    LOG_LEVEL: Logging level (default: INFO)
"""

import argparse
import json
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from quake_markers.core.classifier import classify_magnitude
from quake_markers.core.config import validate_config
from quake_markers.core.geo import PointOfInterest
from quake_markers.core.ordering import largest
from quake_markers.core.threat import affected_points
from quake_markers.orchestrator import Orchestrator
from quake_markers.shell.config_loader import load_config

log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_city(value: str) -> PointOfInterest:
    """Parse a "name,lat,lon" command line value."""
    try:
        name, lat, lon = value.rsplit(",", 2)
        return PointOfInterest(name=name.strip(), latitude=float(lat), longitude=float(lon))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Expected NAME,LAT,LON, got {value!r}"
        ) from None


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Render earthquake markers from a GeoJSON file",
    )
    parser.add_argument("geojson", type=Path, help="USGS GeoJSON file")
    parser.add_argument("output", type=Path, help="PNG file to write")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--height", type=int, help="Image height in pixels")
    parser.add_argument("--zoom", type=int, help="Fixed zoom level (default: fit events)")
    parser.add_argument("--top", type=int, default=10, help="Number of largest events to list")
    parser.add_argument(
        "--city",
        type=parse_city,
        action="append",
        default=[],
        help="NAME,LAT,LON to check against threat circles (repeatable)",
    )
    args = parser.parse_args()

    config = load_config(args.config)

    overrides = {
        key: value
        for key, value in (("width", args.width), ("height", args.height), ("zoom", args.zoom))
        if value is not None
    }
    if overrides:
        config.map = replace(config.map, **overrides)

    validation = validate_config(config)
    for warning in validation.warnings:
        logger.warning("Config %s: %s", warning.field, warning.message)
    if not validation.valid:
        for error in validation.critical_errors:
            logger.error("Config %s: %s", error.field, error.message)
        return 1

    with open(args.geojson, "r") as f:
        geojson = json.load(f)

    orchestrator = Orchestrator(config)
    result = orchestrator.run(geojson)

    print(f"\nLargest {args.top} events:")
    for marker in largest(result.markers, args.top):
        magnitude_class = classify_magnitude(marker.magnitude).value
        print(
            f"  {marker.title}  [{magnitude_class}]"
            f"  (threat radius {marker.threat_radius_km():.1f} km)"
        )
        for city in affected_points(marker.attributes, args.city):
            print(f"    within threat circle: {city.name}")

    if not result.success:
        logger.error("Rendering failed: %s", result.summary)
        return 1

    args.output.write_bytes(result.image.image_bytes)
    logger.info("%s; wrote %s", result.summary, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
