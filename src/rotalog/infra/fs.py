from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path resolution, the non-creating writability probe
guarding every mutation of the log file, and the file timestamp helpers used
to order archives. Acts as an abstraction over the 'os' module to ensure
uniform behavior across Windows and Unix-like systems.
"""

import logging
import os
from typing import Optional, Tuple

from rotalog.domain.errors import PathInaccessibleError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "Rotalog"
UNIX_APP_DIR_NAME = ".rotalog"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/Rotalog
    - Linux/Mac: ~/.rotalog

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.debug(f"Could not create user data dir '{path}': {e}")

    return os.path.abspath(path)


def normalize_path(path: Optional[str]) -> str:
    """
    Expand environment variables and '~' and return an absolute path.

    Args:
        path: Raw input path string.

    Returns:
        str: Normalized absolute path, or an empty string for empty input.
    """
    p = (path or "").strip()
    if not p:
        return ""
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))


def split_log_path(path: str) -> Tuple[str, str]:
    """
    Split a log file path into its parent directory and leaf file name.

    Returns:
        Tuple[str, str]: (absolute parent directory, file name).
    """
    absolute = os.path.abspath(path)
    return os.path.dirname(absolute), os.path.basename(absolute)


# -----------------------------------------------------------------------------
# WRITABILITY GUARD
# -----------------------------------------------------------------------------

def check_writable(path: str) -> bool:
    """
    Report whether the log file can be written without creating it.

    Existing files are opened for binary append (no truncation) and released
    immediately, which also detects files locked by other processes on
    Windows. Missing files require a writable, searchable parent directory.

    Args:
        path: Target log file.

    Returns:
        bool: True if a write is expected to succeed.
    """
    if os.path.isdir(path):
        return False

    if os.path.exists(path):
        try:
            with open(path, "ab"):
                pass
            return True
        except OSError as e:
            logger.debug(f"Writability probe failed for '{path}': {e}")
            return False

    parent, _ = split_log_path(path)
    if not os.path.isdir(parent):
        logger.debug(f"Parent directory '{parent}' does not exist.")
        return False
    return os.access(parent, os.W_OK | os.X_OK)


def ensure_writable(path: str) -> None:
    """
    Raise if the log file cannot be written.

    Raises:
        PathInaccessibleError: Naming the parent directory of the path.
    """
    if not check_writable(path):
        raise PathInaccessibleError(path)


# -----------------------------------------------------------------------------
# TIMESTAMPS
# -----------------------------------------------------------------------------

def get_creation_time(path: str) -> float:
    """
    Best available approximation of a file's creation time.

    Uses st_birthtime where the platform exposes it, st_ctime on Windows
    (creation time there) and st_mtime elsewhere, since POSIX st_ctime
    changes on rename.

    Raises:
        OSError: If the file cannot be stat'ed.
    """
    st = os.stat(path)
    birth = getattr(st, "st_birthtime", None)
    if birth:
        return float(birth)
    if os.name == "nt":
        return st.st_ctime
    return st.st_mtime


def touch_now(path: str) -> bool:
    """
    Set the access and modification times of a file to now.

    Best-effort: returns False instead of raising when the platform refuses.
    """
    try:
        os.utime(path, None)
        return True
    except OSError as e:
        logger.debug(f"Could not update timestamps of '{path}': {e}")
        return False
