"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- Spreadsheet export reader (files)
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from workout_finder.shell.feed_reader import FeedError, read_sheet_values
from workout_finder.shell.config_loader import load_config, load_config_from_env

__all__ = [
    "FeedError",
    "read_sheet_values",
    "load_config",
    "load_config_from_env",
]
