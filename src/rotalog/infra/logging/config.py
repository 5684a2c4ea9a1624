from __future__ import annotations

"""
Diagnostics Logging Configuration.

Settings for rotalog's own diagnostic output (write decisions, rotations,
retention warnings). Unrelated to the delimited log files the library
writes for its callers.
"""

import logging
from dataclasses import dataclass
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DIAG_MAX_BYTES = 1024 * 1024
DIAG_BACKUP_COUNT = 3


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable settings for the diagnostics subsystem.

    Attributes:
        level: Minimum severity name; unknown names mean WARNING.
        console: Mirror diagnostics to stderr.
        log_file: Optional diagnostics file, rotated by size.
        max_bytes: Diagnostics file size before rollover.
        backup_count: Rolled diagnostics files kept.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = DIAG_MAX_BYTES
    backup_count: int = DIAG_BACKUP_COUNT

    @classmethod
    def for_cli(cls, debug: bool, log_file: Optional[str] = None) -> "LoggingConfig":
        """Console diagnostics at WARNING, or DEBUG when '--debug' is given."""
        return cls(level="DEBUG" if debug else "WARNING", console=True, log_file=log_file)

    @property
    def level_no(self) -> int:
        name = str(self.level or "").strip().upper()
        if name == "WARN":
            return logging.WARNING
        value = logging.getLevelName(name)
        return value if isinstance(value, int) else logging.WARNING
