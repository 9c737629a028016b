"""Small file and time helpers."""

from __future__ import annotations

import os
from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the text of ``path``, or an empty string if it cannot be read."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except OSError:
        return ""


def current_timestamp() -> str:
    """Return the local time formatted as ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.now().strftime(TIMESTAMP_FORMAT)