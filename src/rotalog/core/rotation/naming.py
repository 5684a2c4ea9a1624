from __future__ import annotations

"""
Archive Naming.

Derives the timestamped name a rotated file is moved to. Names have second
granularity; two rotations of the same file within one second collide.
"""

import os
from datetime import datetime
from typing import Tuple

from rotalog.domain.constants import ARCHIVE_DATE_FORMAT


def split_name(file_name: str) -> Tuple[str, str]:
    """
    Split a file name at its last dot.

    Returns:
        Tuple[str, str]: (stem, extension including the dot, or '' if none).
    """
    idx = file_name.rfind(".")
    if idx == -1:
        return file_name, ""
    return file_name[:idx], file_name[idx:]


def archive_name(base_file_name: str, now: datetime) -> str:
    """
    Build the archive name for a log file rotated at 'now'.

    Example:
        archive_name("app.log", datetime(2024, 1, 2, 3, 4, 5))
        -> "app_2024-01-02-03-04-05.log"
    """
    stem, ext = split_name(base_file_name)
    return f"{stem}_{now.strftime(ARCHIVE_DATE_FORMAT)}{ext}"


def archive_path(active_path: str, now: datetime) -> str:
    """Full path of the archive, placed beside the active file."""
    absolute = os.path.abspath(active_path)
    parent = os.path.dirname(absolute)
    return os.path.join(parent, archive_name(os.path.basename(absolute), now))
