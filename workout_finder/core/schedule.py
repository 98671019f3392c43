"""Workout scheduling - Pure functions.

This module orders weekly-recurring workouts by how soon each one next
occurs. Workouts that already happened today wrap around to next week.

The reference time is always passed in; nothing here reads the clock
except the `order()` default when the caller omits `now`.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime

from workout_finder.core.workout import Workout


logger = logging.getLogger(__name__)


MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7
MINUTES_PER_DAY = HOURS_PER_DAY * MINUTES_PER_HOUR

# Index 0 is Sunday
DAYS_ORDER = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

DAY_ALIASES = {
    "sun": "Sunday",
    "mon": "Monday",
    "tue": "Tuesday",
    "wed": "Wednesday",
    "th": "Thursday",
    "thu": "Thursday",
    "thur": "Thursday",
    "thurs": "Thursday",
    "fri": "Friday",
    "sat": "Saturday",
}

# Largest reachable offset is 7 days + 1438 minutes, so this always sorts last
UNKNOWN_DAY_OFFSET = (DAYS_PER_WEEK + 1) * MINUTES_PER_DAY

# Hyphen, en-dash, em-dash
RANGE_SEPARATOR = re.compile("[-–—]")
_START_TIME = re.compile(r"^(\d{1,2}):(\d{2})\s*([A-Za-z]+)$")


@dataclass(frozen=True)
class ParsedTime:
    """Start time of a workout within a single day.

    Attributes:
        hour24: Hour on a 24-hour clock (0-23)
        minute: Minute (0-59)
    """
    hour24: int
    minute: int

    @property
    def total_minutes(self) -> int:
        """Minutes since midnight (0-1439)."""
        return self.hour24 * MINUTES_PER_HOUR + self.minute


MIDNIGHT = ParsedTime(hour24=0, minute=0)


def normalize_day_name(day: str) -> str | None:
    """Map a free-text weekday onto its canonical name.

    Pure function. Tries the alias table, then full names, then the
    longest canonical name the input is a prefix of.

    Args:
        day: Weekday text (e.g. "thu", "THURSDAY", "Wedn")

    Returns:
        Canonical weekday name, or None if the day is unknown
    """
    if not isinstance(day, str):
        return None

    key = day.strip().lower()
    if not key:
        return None

    if key in DAY_ALIASES:
        return DAY_ALIASES[key]

    for name in DAYS_ORDER:
        if name.lower() == key:
            return name

    candidates = [name for name in DAYS_ORDER if name.lower().startswith(key)]
    if candidates:
        # max() keeps the first of equal-length names, i.e. calendar order
        return max(candidates, key=len)

    return None


def get_day_index(day: str) -> int | None:
    """Return the weekday index (0=Sunday) for free-text day, or None."""
    name = normalize_day_name(day)
    if name is None:
        return None
    return DAYS_ORDER.index(name)


def parse_time(time_range: str) -> ParsedTime:
    """Parse the start of a time range such as "5:00 AM - 5:45 AM".

    Pure function apart from logging. Malformed input never raises; it
    falls back to midnight and logs a warning.

    Args:
        time_range: Time range text; only the part before the dash is used

    Returns:
        ParsedTime for the start of the range
    """
    if not isinstance(time_range, str):
        logger.warning("Invalid time format (not text): %r", time_range)
        return MIDNIGHT

    start = RANGE_SEPARATOR.split(time_range, maxsplit=1)[0].strip()
    if not start:
        logger.warning("Invalid time format (missing time component): %r", time_range)
        return MIDNIGHT

    match = _START_TIME.match(start)
    if match is None:
        logger.warning("Invalid time format (missing time or period): %r", time_range)
        return MIDNIGHT

    hours = int(match.group(1))
    minutes = int(match.group(2))
    period = match.group(3).upper()

    if not 1 <= hours <= 12 or not 0 <= minutes <= 59:
        logger.warning(
            "Invalid time values (hours: %d, minutes: %d): %r",
            hours, minutes, time_range,
        )
        return MIDNIGHT

    if period not in ("AM", "PM"):
        logger.warning("Invalid period (must be AM/PM): %r", time_range)
        return MIDNIGHT

    hour24 = hours % 12
    if period == "PM":
        hour24 += 12

    return ParsedTime(hour24=hour24, minute=minutes)


def get_week_position(now: datetime) -> tuple[int, int]:
    """Return (weekday index with 0=Sunday, minute of day) for a timestamp."""
    day_index = (now.weekday() + 1) % DAYS_PER_WEEK
    return day_index, now.hour * MINUTES_PER_HOUR + now.minute


def minutes_until(
    day_index: int | None,
    total_minutes: int,
    current_day_index: int,
    current_minutes: int,
) -> int:
    """Calculate minutes from now until the next occurrence.

    Pure function. A workout at exactly the current minute counts as
    upcoming today; one earlier today moves to the same day next week.

    Args:
        day_index: Workout weekday (0=Sunday), None if unknown
        total_minutes: Workout start, minutes since midnight
        current_day_index: Current weekday (0=Sunday)
        current_minutes: Current minute of day

    Returns:
        Occurrence offset in minutes, UNKNOWN_DAY_OFFSET for unknown days
    """
    if day_index is None:
        return UNKNOWN_DAY_OFFSET

    days = (day_index - current_day_index) % DAYS_PER_WEEK

    if days == 0 and total_minutes < current_minutes:
        return DAYS_PER_WEEK * MINUTES_PER_DAY + total_minutes

    if days == 0:
        return total_minutes - current_minutes

    return days * MINUTES_PER_DAY + total_minutes


def get_occurrence_offset(workout: Workout, now: datetime) -> int:
    """Minutes from `now` until the workout next starts.

    Pure function apart from logging.
    """
    current_day_index, current_minutes = get_week_position(now)

    day_index = get_day_index(workout.day_of_week)
    if day_index is None:
        logger.warning(
            "Unknown day %r for workout %r, sorting last",
            workout.day_of_week, workout.name,
        )
        return UNKNOWN_DAY_OFFSET

    start = parse_time(workout.time_range)
    return minutes_until(
        day_index,
        start.total_minutes,
        current_day_index,
        current_minutes,
    )


def order(workouts: list[Workout], now: datetime | None = None) -> list[Workout]:
    """Sort workouts by next occurrence relative to `now`.

    Returns a new list; the input is untouched. Ties on offset are broken
    by name (case-insensitive, empty first), then by entry ID, so the
    result does not depend on input order.

    Args:
        workouts: Workouts to order
        now: Reference time, defaults to the local wall clock

    Returns:
        Workouts ordered soonest first
    """
    if now is None:
        now = datetime.now()

    def sort_key(workout: Workout) -> tuple[int, str, str, str]:
        name = str(workout.name or "")
        return (
            get_occurrence_offset(workout, now),
            name.casefold(),
            name,
            str(workout.id),
        )

    ordered = sorted(workouts, key=sort_key)
    logger.debug("Ordered %d workouts relative to %s", len(ordered), now.isoformat())
    return ordered
