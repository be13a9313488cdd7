"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files. All I/O is
contained here.

Models (Config, StyleConfig, MapConfig) are defined in
quake_markers/core/config.py to avoid information leakage between layers.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from quake_markers.core.config import Color, Config, MapConfig, StyleConfig


logger = logging.getLogger(__name__)


def _parse_color(value: Any) -> Color:
    """Parse a color given as [r, g, b] or "#rrggbb"."""
    if isinstance(value, str):
        hex_color = value.lstrip("#")
        if len(hex_color) != 6:
            raise ValueError(f"Invalid hex color: {value!r}")
        return (
            int(hex_color[0:2], 16),
            int(hex_color[2:4], 16),
            int(hex_color[4:6], 16),
        )
    return tuple(int(c) for c in value)


def _parse_style(data: dict[str, Any]) -> StyleConfig:
    """Parse marker style settings from config data."""
    defaults = StyleConfig()
    colors = data.get("colors", {})

    return StyleConfig(
        shallow_color=_parse_color(colors.get("shallow", defaults.shallow_color)),
        intermediate_color=_parse_color(colors.get("intermediate", defaults.intermediate_color)),
        deep_color=_parse_color(colors.get("deep", defaults.deep_color)),
        overlay_buffer_px=float(data.get("overlay_buffer_px", defaults.overlay_buffer_px)),
        overlay_stroke_weight=float(data.get("overlay_stroke_weight", defaults.overlay_stroke_weight)),
        label_offset_px=float(data.get("label_offset_px", defaults.label_offset_px)),
        label_height_px=float(data.get("label_height_px", defaults.label_height_px)),
        label_padding_px=float(data.get("label_padding_px", defaults.label_padding_px)),
        label_stroke_gray=int(data.get("label_stroke_gray", defaults.label_stroke_gray)),
        label_fill_gray=int(data.get("label_fill_gray", defaults.label_fill_gray)),
        label_text_gray=int(data.get("label_text_gray", defaults.label_text_gray)),
    )


def _parse_map(data: dict[str, Any]) -> MapConfig:
    """Parse static map settings from config data."""
    defaults = MapConfig()
    zoom = data.get("zoom")

    return MapConfig(
        width=int(data.get("width", defaults.width)),
        height=int(data.get("height", defaults.height)),
        zoom=int(zoom) if zoom is not None else None,
        tile_url=data.get("tile_url", defaults.tile_url),
    )


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    Pure function.

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    return Config(
        style=_parse_style(data.get("style") or {}),
        map=_parse_map(data.get("map") or {}),
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", "config/config.yaml")

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: %dx%d map, zoom %s",
        config.map.width,
        config.map.height,
        config.map.zoom if config.map.zoom is not None else "auto",
    )

    return config
