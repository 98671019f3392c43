"""Map viewport calculation - Pure functions.

This module derives a map center and zoom level that frames a set of
workout locations. Rendering the map is left to the caller.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any

from workout_finder.core.geo import (
    EARTH_RADIUS_KM,
    calculate_centroid,
    max_pairwise_distance,
)
from workout_finder.core.workout import Coordinate, Workout


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LatLng:
    """A latitude/longitude pair in degrees."""
    lat: float
    lng: float


@dataclass(frozen=True)
class ZoomTier:
    """Zoom level used when all points lie within a distance.

    Attributes:
        max_distance_km: Upper bound (exclusive) on the widest point spread
        zoom: Zoom level for spreads under the bound
    """
    max_distance_km: float
    zoom: int


# Checked in order; the first tier whose bound exceeds the spread wins
ZOOM_THRESHOLDS = (
    ZoomTier(max_distance_km=5.0, zoom=13),  # neighborhood
    ZoomTier(max_distance_km=15.0, zoom=12),  # small city
    ZoomTier(max_distance_km=30.0, zoom=11),  # large city
    ZoomTier(max_distance_km=60.0, zoom=10),  # metropolitan
    ZoomTier(max_distance_km=100.0, zoom=9),  # regional
)
WIDE_REGIONAL_ZOOM = 8

MIN_ZOOM = 4
MAX_ZOOM = 15

# Geographic center of the contiguous United States
DEFAULT_CENTER = LatLng(lat=39.8283, lng=-98.5795)


@dataclass(frozen=True)
class ViewportSettings:
    """Tunable parameters for frame().

    Attributes:
        min_zoom: Lowest zoom frame() will return
        max_zoom: Highest zoom frame() will return
        zoom_thresholds: Ordered distance tiers, closest first
        wide_zoom: Zoom when the spread exceeds every tier
        default_center: Center used when there are no valid points
        earth_radius_km: Sphere radius for distance calculations
    """
    min_zoom: int = MIN_ZOOM
    max_zoom: int = MAX_ZOOM
    zoom_thresholds: tuple[ZoomTier, ...] = ZOOM_THRESHOLDS
    wide_zoom: int = WIDE_REGIONAL_ZOOM
    default_center: LatLng = DEFAULT_CENTER
    earth_radius_km: float = EARTH_RADIUS_KM


DEFAULT_VIEWPORT_SETTINGS = ViewportSettings()


@dataclass(frozen=True)
class Marker:
    """A map marker for one valid point."""
    lat: float
    lng: float
    title: str = ""


@dataclass(frozen=True)
class Viewport:
    """Map center, zoom level and markers.

    Attributes:
        center: Map center
        zoom: Discrete zoom level
        markers: One marker per valid input point, in input order
    """
    center: LatLng
    zoom: int
    markers: tuple[Marker, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "center": {"lat": self.center.lat, "lng": self.center.lng},
            "zoom": self.zoom,
            "markers": [
                {"lat": m.lat, "lng": m.lng, "title": m.title}
                for m in self.markers
            ],
        }


def parse_coordinate(value: Any) -> float | None:
    """Parse a latitude or longitude value.

    Pure function.

    Args:
        value: Number or numeric string

    Returns:
        Finite float, or None if the value is missing or not numeric
    """
    if value is None or isinstance(value, bool):
        return None

    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        return None

    if not math.isfinite(number):
        return None

    return number


def get_zoom_level(
    distance_km: float,
    settings: ViewportSettings = DEFAULT_VIEWPORT_SETTINGS,
) -> int:
    """Map the widest point spread onto a zoom level.

    Pure function. Closer clusters get higher (more zoomed-in) levels.

    Args:
        distance_km: Largest pairwise distance between points
        settings: Threshold table to use

    Returns:
        Zoom level before clamping
    """
    for tier in settings.zoom_thresholds:
        if distance_km < tier.max_distance_km:
            return tier.zoom
    return settings.wide_zoom


def clamp_zoom(zoom: int, min_zoom: int = MIN_ZOOM, max_zoom: int = MAX_ZOOM) -> int:
    """Limit zoom to [min_zoom, max_zoom]."""
    return max(min_zoom, min(zoom, max_zoom))


def default_viewport(settings: ViewportSettings = DEFAULT_VIEWPORT_SETTINGS) -> Viewport:
    """Viewport used when there is nothing to frame."""
    return Viewport(center=settings.default_center, zoom=settings.min_zoom)


def frame(
    points: list[Coordinate],
    settings: ViewportSettings = DEFAULT_VIEWPORT_SETTINGS,
) -> Viewport:
    """Calculate a viewport that frames all valid points.

    Pure function apart from logging. Points whose latitude or longitude
    is not a finite number are skipped. The center is the arithmetic mean
    of the valid points.

    Args:
        points: Points to frame
        settings: Zoom tiers, clamp bounds and fallback center

    Returns:
        Viewport with center, clamped zoom and markers
    """
    markers = []

    for point in points:
        lat = parse_coordinate(point.latitude)
        lng = parse_coordinate(point.longitude)
        if lat is None or lng is None:
            logger.warning(
                "Skipping point %r with invalid coordinates (%r, %r)",
                point.title, point.latitude, point.longitude,
            )
            continue
        markers.append(Marker(lat=lat, lng=lng, title=point.title or ""))

    if not markers:
        logger.debug("No valid points to frame, using default viewport")
        return default_viewport(settings)

    coords = [(m.lat, m.lng) for m in markers]
    center_lat, center_lng = calculate_centroid(coords)
    spread_km = max_pairwise_distance(coords, settings.earth_radius_km)

    zoom = clamp_zoom(
        get_zoom_level(spread_km, settings),
        settings.min_zoom,
        settings.max_zoom,
    )

    logger.debug(
        "Framed %d points: spread %.1f km, zoom %d",
        len(markers), spread_km, zoom,
    )

    return Viewport(
        center=LatLng(lat=center_lat, lng=center_lng),
        zoom=zoom,
        markers=tuple(markers),
    )


def frame_workouts(
    workouts: list[Workout],
    settings: ViewportSettings = DEFAULT_VIEWPORT_SETTINGS,
) -> Viewport:
    """Frame the locations of a list of workouts.

    Pure function. Markers are titled with workout names.
    """
    return frame([w.coordinate for w in workouts], settings)
