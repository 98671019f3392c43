"""Feed Reader - Imperative Shell.

Reads a saved spreadsheet export (the JSON body returned by the sheets
values endpoint) from disk. Parsing rows into workouts is done by the
core layer.
"""

import json
import logging
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)


class FeedError(Exception):
    """Raised when a feed file cannot be read or has the wrong shape."""


def read_sheet_values(feed_path: str | Path) -> list[list[Any]]:
    """Read the "values" rows from a saved spreadsheet export.

    This method performs file I/O.

    Args:
        feed_path: Path to the JSON export

    Returns:
        Header row followed by data rows (empty if the sheet has no values)

    Raises:
        FeedError: If the file cannot be read or is not a values payload
    """
    path = Path(feed_path)

    logger.info("Reading feed from %s", path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError as e:
        raise FeedError(f"Feed file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise FeedError(f"Feed file is not valid JSON: {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise FeedError(f"Feed file is not UTF-8 text: {path}: {e}") from e
    except OSError as e:
        raise FeedError(f"Cannot read feed file {path}: {e}") from e

    if isinstance(payload, list):
        values = payload
    elif isinstance(payload, dict):
        values = payload.get("values", [])
    else:
        raise FeedError(f"Unexpected feed format in {path}")

    if not isinstance(values, list):
        raise FeedError(f"Feed 'values' must be a list of rows in {path}")

    logger.info("Read %d rows from feed", len(values))
    return values
