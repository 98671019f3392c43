"""Workout filters - Pure functions.

Narrow a region's workouts by weekday or workout type.
"""

from workout_finder.core.schedule import normalize_day_name
from workout_finder.core.workout import Workout


def filter_by_day(workouts: list[Workout], day: str | None) -> list[Workout]:
    """Filter workouts to a single weekday.

    Pure function. Both the filter and each workout's day are normalized,
    so "thu" matches "Thursday".

    Args:
        workouts: Workouts to filter
        day: Weekday text, None or empty for no filtering

    Returns:
        Matching workouts in input order; empty if the day is unknown
    """
    if not day:
        return list(workouts)

    wanted = normalize_day_name(day)
    if wanted is None:
        return []

    return [w for w in workouts if normalize_day_name(w.day_of_week) == wanted]


def filter_by_type(workouts: list[Workout], workout_type: str | None) -> list[Workout]:
    """Filter workouts by type, case-insensitively.

    Pure function. None or empty means no filtering.
    """
    if not workout_type:
        return list(workouts)

    wanted = workout_type.strip().lower()
    return [w for w in workouts if w.workout_type.strip().lower() == wanted]


def get_workout_types(workouts: list[Workout]) -> list[str]:
    """Sorted unique non-empty workout types."""
    return sorted({w.workout_type for w in workouts if w.workout_type})
