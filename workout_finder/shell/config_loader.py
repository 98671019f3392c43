"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (Config, ViewportSettings) are defined in the core layer
to avoid information leakage between layers.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from workout_finder.core.config import Config
from workout_finder.core.viewport import (
    DEFAULT_CENTER,
    MAX_ZOOM,
    MIN_ZOOM,
    WIDE_REGIONAL_ZOOM,
    ZOOM_THRESHOLDS,
    LatLng,
    ViewportSettings,
    ZoomTier,
)
from workout_finder.core.geo import EARTH_RADIUS_KM


logger = logging.getLogger(__name__)


def _resolve_value(value: Any) -> Any:
    """Resolve a ${VAR} placeholder from the environment.

    Non-string values and plain strings are returned unchanged. Unset
    variables leave the placeholder in place.
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def _parse_center(data: dict[str, Any]) -> LatLng:
    """Parse a map center from config data."""
    return LatLng(
        lat=float(data["latitude"]),
        lng=float(data["longitude"]),
    )


def _parse_zoom_tier(data: dict[str, Any]) -> ZoomTier:
    """Parse one zoom threshold from config data."""
    return ZoomTier(
        max_distance_km=float(data["distance_km"]),
        zoom=int(data["zoom"]),
    )


def _parse_viewport(data: dict[str, Any]) -> ViewportSettings:
    """Parse viewport settings, falling back to module defaults."""
    center = DEFAULT_CENTER
    if "default_center" in data:
        center = _parse_center(data["default_center"])

    thresholds = ZOOM_THRESHOLDS
    if "zoom_thresholds" in data:
        thresholds = tuple(_parse_zoom_tier(t) for t in data["zoom_thresholds"])

    return ViewportSettings(
        min_zoom=int(data.get("min_zoom", MIN_ZOOM)),
        max_zoom=int(data.get("max_zoom", MAX_ZOOM)),
        zoom_thresholds=thresholds,
        wide_zoom=int(data.get("wide_zoom", WIDE_REGIONAL_ZOOM)),
        default_center=center,
        earth_radius_km=float(data.get("earth_radius_km", EARTH_RADIUS_KM)),
    )


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    feed_path = _resolve_value(data.get("feed_path"))
    region = _resolve_value(data.get("region"))

    return Config(
        feed_path=str(feed_path) if feed_path else None,
        region=str(region) if region else None,
        log_level=str(_resolve_value(data.get("log_level", "INFO"))).upper(),
        viewport=_parse_viewport(data.get("viewport") or {}),
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
        "Loaded config: feed=%s, region=%s, zoom=[%d, %d]",
        config.feed_path,
        config.region,
        config.viewport.min_zoom,
        config.viewport.max_zoom,
    )

    return config


def load_config_from_env() -> Config:
    """Load minimal configuration from environment variables.

    Useful for simple deployments without a YAML file.

    Environment variables:
        FEED_PATH: Saved spreadsheet export to read
        REGION: Default region slug
        LOG_LEVEL: Logging level name
        MIN_ZOOM: Lowest zoom level
        MAX_ZOOM: Highest zoom level

    Returns:
        Config object from environment
    """
    viewport = ViewportSettings(
        min_zoom=int(os.environ.get("MIN_ZOOM", str(MIN_ZOOM))),
        max_zoom=int(os.environ.get("MAX_ZOOM", str(MAX_ZOOM))),
    )

    return Config(
        feed_path=os.environ.get("FEED_PATH") or None,
        region=os.environ.get("REGION") or None,
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        viewport=viewport,
    )
