"""Workout data models and parsing - Pure functions.

This module maps header-keyed feed rows into typed Workout objects.
All functions are pure with no side effects.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


# Feed columns that map onto named Workout attributes
_FIELD_MAP = {
    "Entry ID": "id",
    "Name": "name",
    "Group": "day_of_week",
    "Time": "time_range",
    "Latitude": "latitude",
    "Longitude": "longitude",
    "Region": "region",
    "Location": "location",
    "Type": "workout_type",
}


@dataclass(frozen=True)
class Coordinate:
    """A point to place on the map.

    Coordinates are kept as received (string or number); the viewport
    calculator decides which ones are usable.

    Attributes:
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        title: Marker title
    """
    latitude: str | float
    longitude: str | float
    title: str = ""


@dataclass(frozen=True)
class Workout:
    """Immutable weekly workout record.

    Attributes:
        id: Feed entry ID
        name: Display name of the workout
        day_of_week: Free-text weekday (e.g. "Thursday", "thu")
        time_range: Free-text time range (e.g. "5:00 AM - 5:45 AM")
        latitude: Latitude as received from the feed
        longitude: Longitude as received from the feed
        region: Region name
        location: Street address
        workout_type: Workout type (e.g. "Bootcamp", "Ruck")
        extra: All other feed columns, passed through untouched (read-only)
    """
    id: str = ""
    name: str = ""
    day_of_week: str = ""
    time_range: str = ""
    latitude: str | float = ""
    longitude: str | float = ""
    region: str = ""
    location: str = ""
    workout_type: str = ""
    extra: Mapping[str, str] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        # Copy so later changes to the caller's dict do not leak in
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    @property
    def coordinate(self) -> Coordinate:
        """Return the workout's map point, titled with its name."""
        return Coordinate(
            latitude=self.latitude,
            longitude=self.longitude,
            title=self.name,
        )


def parse_workout(record: dict[str, Any]) -> Workout:
    """Parse a header-keyed feed row into a Workout.

    Pure function. Missing columns become empty strings; unknown columns
    are kept in `extra`.

    Args:
        record: Mapping of column header to cell value

    Returns:
        Workout object
    """
    known: dict[str, Any] = {}
    extra: dict[str, str] = {}

    for column, value in record.items():
        attribute = _FIELD_MAP.get(column)
        if attribute is not None:
            known[attribute] = value if value is not None else ""
        else:
            extra[column] = value

    return Workout(**known, extra=extra)


def parse_workouts(records: list[dict[str, Any]]) -> list[Workout]:
    """Parse a list of feed rows into Workouts.

    Pure function. Non-dict entries are skipped.
    """
    return [parse_workout(r) for r in records if isinstance(r, dict)]
