"""Spreadsheet feed mapping - Pure functions.

This module turns a spreadsheet "values" payload (a header row followed
by data rows) into Workout objects and groups them by region. Fetching
the payload is handled by the shell layer.
"""

import logging
import re
from typing import Any

from workout_finder.core.schedule import RANGE_SEPARATOR
from workout_finder.core.workout import Workout, parse_workout


logger = logging.getLogger(__name__)


# Columns kept from the feed; anything else is dropped
WORKOUT_FIELDS = (
    "Entry ID",
    "Region",
    "Location",
    "Group",
    "Workout Type",
    "Time",
    "Type",
    "Name",
    "Description",
    "Notes",
    "Website",
    "Latitude",
    "Longitude",
    "Marker Icon",
    "Marker Color",
    "Icon Color",
    "Custom Size",
    "Image",
)

_TIME_OF_DAY = re.compile(r"^(\d{1,2}):(\d{2})(?:\s*([AaPp][Mm]))?$")


def to_kebab_case(text: str) -> str:
    """Convert a region name to a URL slug.

    Pure function.

    Examples:
        "Fort Worth" -> "fort-worth"
        "St. Louis (MO)" -> "st-louis-mo"
    """
    slug = re.sub(r"\s+", "-", text.lower())
    return re.sub(r"[^a-z0-9-]", "", slug)


def convert_to_12_hour(time: str) -> str:
    """Render a single time of day as "h:MM AM/PM".

    Pure function apart from logging. Accepts 24-hour times ("17:30") and
    12-hour times that already carry a period ("5:30 pm"). Anything it
    cannot read is returned unchanged.

    Args:
        time: Time of day text

    Returns:
        Normalized time, or the original text
    """
    text = time.strip()
    if not text:
        return time

    match = _TIME_OF_DAY.match(text)
    if match is None:
        logger.debug("Leaving unrecognized time as-is: %r", time)
        return time

    hours = int(match.group(1))
    minutes = int(match.group(2))
    period = match.group(3)

    if period is not None:
        if not 1 <= hours <= 12 or minutes > 59:
            logger.warning("Invalid time values (hours: %d, minutes: %d): %r", hours, minutes, time)
            return time
        return f"{hours}:{minutes:02d} {period.upper()}"

    if hours > 23 or minutes > 59:
        logger.warning("Invalid time values (hours: %d, minutes: %d): %r", hours, minutes, time)
        return time

    suffix = "PM" if hours >= 12 else "AM"
    return f"{hours % 12 or 12}:{minutes:02d} {suffix}"


def normalize_time_range(time_range: str) -> str:
    """Normalize both ends of a time range to 12-hour format.

    Pure function. Hyphens, en-dashes and em-dashes are all accepted
    as the separator; the result always uses " - ".

    Example:
        "05:30–06:15" -> "5:30 AM - 6:15 AM"
    """
    parts = [p.strip() for p in RANGE_SEPARATOR.split(time_range)]
    return " - ".join(convert_to_12_hour(p) for p in parts)


def parse_row(headers: list[str], row: list[Any]) -> Workout:
    """Map one spreadsheet row onto a Workout.

    Pure function. Empty cells are dropped; the Time column is always
    present and normalized.
    """
    record: dict[str, str] = {}

    for i, header in enumerate(headers):
        if header not in WORKOUT_FIELDS:
            continue

        cell = row[i] if i < len(row) else ""
        cell = "" if cell is None else str(cell)

        if header == "Time":
            record["Time"] = normalize_time_range(cell)
        elif cell:
            record[header] = cell

    record.setdefault("Time", "")
    return parse_workout(record)


def parse_sheet_values(values: list[list[Any]]) -> list[Workout]:
    """Parse a spreadsheet values payload into Workouts.

    Pure function.

    Args:
        values: Header row followed by data rows

    Returns:
        One Workout per data row, in sheet order
    """
    if not values or len(values) < 2:
        return []

    headers = [str(h) for h in values[0]]
    workouts = []

    for index, row in enumerate(values[1:], start=2):
        if not isinstance(row, list):
            logger.warning("Skipping malformed sheet row %d: %r", index, row)
            continue
        workouts.append(parse_row(headers, row))

    logger.debug("Parsed %d workouts from %d sheet rows", len(workouts), len(values) - 1)
    return workouts


def get_region_slugs(workouts: list[Workout]) -> list[str]:
    """Sorted unique region slugs.

    Pure function. Workouts without a region are ignored.
    """
    slugs = {to_kebab_case(w.region) for w in workouts}
    slugs.discard("")
    return sorted(slugs)


def filter_by_region(workouts: list[Workout], region_slug: str) -> list[Workout]:
    """Filter workouts to those in the region with the given slug.

    Pure function.
    """
    return [w for w in workouts if to_kebab_case(w.region) == region_slug]


def get_region_name(workouts: list[Workout], region_slug: str) -> str | None:
    """Display name of the region with the given slug, or None."""
    for workout in workouts:
        if to_kebab_case(workout.region) == region_slug:
            return workout.region
    return None
