"""Locations where the application keeps its data."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_data_dir

APP_DIR_NAME = "ED_Highway"


def writable_location() -> Path:
    """Per-user data directory, falling back to the home directory."""
    base = user_data_dir()
    if not base:
        base = os.path.expanduser("~")
        if not base or base == "~":
            raise RuntimeError("Can not detect writable location to store data.")
    return Path(base)


def writable_location_app() -> Path:
    """Directory for this application's data."""
    return writable_location() / APP_DIR_NAME