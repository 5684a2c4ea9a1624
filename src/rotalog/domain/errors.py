from __future__ import annotations

"""
Domain Error Hierarchy.

Every failure surfaced to callers derives from RotalogError. The concrete
classes also inherit the matching builtin (OSError, ValueError, ...) so that
callers handling generic I/O or value errors keep working.
"""

import os


class RotalogError(Exception):
    """Base class for all errors raised by rotalog."""


class PathInaccessibleError(RotalogError, OSError):
    """
    The active log file, or its parent directory, cannot be opened for writing.

    Attributes:
        path: The log file path that was probed.
        parent_dir: The directory reported to the caller.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self.parent_dir = os.path.dirname(os.path.abspath(path))
        super().__init__(
            f"Unable to write to '{path}'. Check that the directory "
            f"'{self.parent_dir}' exists and is writable."
        )

    def __str__(self) -> str:
        return self.args[0]


class NameCollisionError(RotalogError, FileExistsError):
    """
    The archive name computed for a rotation already exists.

    Attributes:
        archive_path: The archive target that was already taken.
    """

    def __init__(self, archive_path: str) -> None:
        self.archive_path = archive_path
        super().__init__(
            f"Archive '{archive_path}' already exists. "
            f"Rotation aborted; the active file was left in place."
        )

    def __str__(self) -> str:
        return self.args[0]


class InvalidRecordError(RotalogError, ValueError):
    """A log record could not be constructed from the supplied values."""


class ConfigurationError(RotalogError, ValueError):
    """A log file configuration value is invalid."""
