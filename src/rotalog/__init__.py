from __future__ import annotations

"""
rotalog: delimited, size-rotated log files.

    >>> from rotalog import log_message
    >>> log_message("app.log", "Operation completed successfully.", code=100)
"""

from rotalog.core.rotation import (
    archive_name,
    enforce_retention,
    should_rotate,
)
from rotalog.core.writer import log_message, write_log, write_record
from rotalog.domain.config import LogFileConfig
from rotalog.domain.constants import LogEncoding, LogLevel
from rotalog.domain.errors import (
    ConfigurationError,
    InvalidRecordError,
    NameCollisionError,
    PathInaccessibleError,
    RotalogError,
)
from rotalog.domain.records import LogRecord
from rotalog.domain.write_models import RetentionResult, WriteOutcome
from rotalog.infra.fs import check_writable

__version__ = "1.0.0"

__all__ = [
    "log_message",
    "write_log",
    "write_record",
    "should_rotate",
    "archive_name",
    "enforce_retention",
    "check_writable",
    "LogFileConfig",
    "LogRecord",
    "LogLevel",
    "LogEncoding",
    "WriteOutcome",
    "RetentionResult",
    "RotalogError",
    "PathInaccessibleError",
    "NameCollisionError",
    "InvalidRecordError",
    "ConfigurationError",
]
