"""Geographic calculations - Pure functions.

This module provides distance and center calculations for workout
locations. All functions are pure with no side effects.
"""

import math
from itertools import combinations


# Earth's radius in kilometers
EARTH_RADIUS_KM = 6371.0


def calculate_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Calculate distance between two points using Haversine formula.

    Pure function.

    Args:
        lat1: Latitude of first point
        lon1: Longitude of first point
        lat2: Latitude of second point
        lon2: Longitude of second point
        radius_km: Sphere radius (default: Earth)

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
    # Rounding can push a just outside [0, 1] for antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return radius_km * c


def calculate_centroid(points: list[tuple[float, float]]) -> tuple[float, float]:
    """Arithmetic mean of (latitude, longitude) pairs.

    Pure function. Not geodesically exact, which is fine at city and
    regional zoom levels. Does not handle the antimeridian.

    Args:
        points: Non-empty list of (latitude, longitude)

    Returns:
        (latitude, longitude) of the centroid
    """
    count = len(points)
    return (
        sum(lat for lat, _ in points) / count,
        sum(lon for _, lon in points) / count,
    )


def max_pairwise_distance(
    points: list[tuple[float, float]],
    radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Largest great-circle distance between any two points.

    Pure function. Zero for fewer than two points.
    """
    return max(
        (
            calculate_distance(a[0], a[1], b[0], b[1], radius_km)
            for a, b in combinations(points, 2)
        ),
        default=0.0,
    )
