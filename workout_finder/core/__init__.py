"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Workout data parsing and feed mapping
- Next-occurrence ordering
- Geo/distance calculations
- Map viewport framing
- Day and type filters

All functions here are deterministic and have no I/O.
"""

from workout_finder.core.workout import Coordinate, Workout, parse_workout
from workout_finder.core.schedule import normalize_day_name, order, parse_time
from workout_finder.core.geo import calculate_distance
from workout_finder.core.viewport import Viewport, ViewportSettings, frame, frame_workouts
from workout_finder.core.feed import filter_by_region, get_region_slugs, parse_sheet_values
from workout_finder.core.filters import filter_by_day, filter_by_type
from workout_finder.core.location import extract_city_and_state

__all__ = [
    # Workout
    "Coordinate",
    "Workout",
    "parse_workout",
    # Schedule
    "normalize_day_name",
    "order",
    "parse_time",
    # Geo
    "calculate_distance",
    # Viewport
    "Viewport",
    "ViewportSettings",
    "frame",
    "frame_workouts",
    # Feed
    "filter_by_region",
    "get_region_slugs",
    "parse_sheet_values",
    # Filters
    "filter_by_day",
    "filter_by_type",
    # Location
    "extract_city_and_state",
]
