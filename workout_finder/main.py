"""Command-line Entry Point.

Thin wrapper that loads configuration and a saved feed export, then
runs the core: region selection, filters, ordering and map framing.

Usage:
    # List regions in the feed
    python main.py --feed data/sheet.json --list-regions

    # Upcoming workouts for a region, as JSON
    python main.py --feed data/sheet.json --region fort-worth

    # Thursday bootcamps, ordered relative to a fixed time
    python main.py --feed data/sheet.json --region fort-worth \\
        --day thu --type bootcamp --now 2024-02-01T10:30:00

Environment:
    CONFIG_PATH: Path to config file (default: config/config.yaml)
    LOG_LEVEL: Logging level (default: INFO)
"""

import argparse
import json
import logging
import os
import sys
from datetime import datetime
from typing import Any

from workout_finder.core.config import Config, validate_config
from workout_finder.core.feed import (
    filter_by_region,
    get_region_name,
    get_region_slugs,
    parse_sheet_values,
)
from workout_finder.core.filters import filter_by_day, filter_by_type
from workout_finder.core.location import extract_city_and_state
from workout_finder.core.schedule import normalize_day_name, order
from workout_finder.core.viewport import ViewportSettings, frame_workouts
from workout_finder.core.workout import Workout
from workout_finder.shell.config_loader import load_config, load_config_from_env
from workout_finder.shell.feed_reader import FeedError, read_sheet_values


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _get_config(config_path: str | None = None) -> Config:
    """Load configuration from file or environment."""
    config_path = config_path or os.environ.get("CONFIG_PATH")

    if config_path:
        return load_config(config_path)
    elif os.environ.get("FEED_PATH"):
        # Simple env-based config
        return load_config_from_env()
    else:
        # Try default config path
        return load_config()


def format_workout(workout: Workout) -> dict[str, Any]:
    """Summarize a workout for listing output."""
    return {
        "id": workout.id,
        "name": workout.name,
        "day": normalize_day_name(workout.day_of_week) or workout.day_of_week,
        "time": workout.time_range,
        "type": workout.workout_type,
        "city": extract_city_and_state(workout.location),
        "latitude": workout.latitude,
        "longitude": workout.longitude,
    }


def build_listing(
    workouts: list[Workout],
    region_slug: str,
    now: datetime,
    day: str | None = None,
    workout_type: str | None = None,
    settings: ViewportSettings | None = None,
) -> dict[str, Any]:
    """Select, filter, order and frame one region's workouts.

    Args:
        workouts: All workouts from the feed
        region_slug: Region to list
        now: Reference time for ordering
        day: Optional weekday filter
        workout_type: Optional workout type filter
        settings: Viewport settings (default: module defaults)

    Returns:
        JSON-serializable listing with region, workouts and viewport
    """
    selected = filter_by_region(workouts, region_slug)
    selected = filter_by_day(selected, day)
    selected = filter_by_type(selected, workout_type)

    ordered = order(selected, now)
    viewport = frame_workouts(ordered, settings or ViewportSettings())

    logger.info(
        "Region %s: %d workouts (%d after filters)",
        region_slug,
        len(filter_by_region(workouts, region_slug)),
        len(ordered),
    )

    return {
        "region": get_region_name(workouts, region_slug) or region_slug,
        "region_slug": region_slug,
        "workouts": [format_workout(w) for w in ordered],
        "viewport": viewport.to_dict(),
    }


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="List upcoming workouts for a region from a saved sheet export",
    )
    parser.add_argument(
        "--feed", "-f",
        type=str,
        help="Path to the saved sheet export (overrides feed_path in config)",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--region", "-r",
        type=str,
        help="Region slug (e.g., fort-worth)",
    )
    parser.add_argument(
        "--day", "-d",
        type=str,
        help="Only show workouts on this day (e.g., thu, Thursday)",
    )
    parser.add_argument(
        "--type", "-t",
        dest="workout_type",
        type=str,
        help="Only show workouts of this type (e.g., bootcamp)",
    )
    parser.add_argument(
        "--now",
        type=datetime.fromisoformat,
        help="Reference time as ISO 8601 (default: current local time)",
    )
    parser.add_argument(
        "--list-regions",
        action="store_true",
        help="Print region slugs and exit",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    config = _get_config(args.config)
    logging.getLogger().setLevel(getattr(logging, config.log_level, logging.INFO))

    validation = validate_config(config)
    for warning in validation.warnings:
        logger.debug("Config warning: %s: %s", warning.field, warning.message)
    if not validation.valid:
        for error in validation.critical_errors:
            logger.error("Config error: %s: %s", error.field, error.message)
        return 1

    feed_path = args.feed or config.feed_path
    if feed_path and feed_path.startswith("${"):
        logger.warning("Feed path placeholder %s is not set in the environment", feed_path)
        feed_path = None
    if not feed_path:
        logger.error("No feed given; use --feed or set feed_path in config")
        return 1

    try:
        values = read_sheet_values(feed_path)
    except FeedError as e:
        logger.error("%s", e)
        return 1

    workouts = parse_sheet_values(values)
    slugs = get_region_slugs(workouts)

    if args.list_regions:
        print("\n".join(slugs))
        return 0

    region_slug = args.region or config.region
    if not region_slug:
        logger.error("No region given; use --region (available: %s)", ", ".join(slugs))
        return 1

    if region_slug not in slugs:
        logger.error("Unknown region: %s", region_slug)
        return 1

    listing = build_listing(
        workouts,
        region_slug,
        now=args.now or datetime.now(),
        day=args.day,
        workout_type=args.workout_type,
        settings=config.viewport,
    )

    print(json.dumps(listing, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
