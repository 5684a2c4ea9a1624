from __future__ import annotations

"""
Write Orchestration.

Sequences a single write call: existence check, size check, rotation with
header re-creation, optional retention, and finally the append of exactly
one data row. Every step runs under the per-path lock, and a failed
writability probe short-circuits the call before anything is written.
"""

import logging
import os
from datetime import datetime
from typing import Callable

from rotalog.core.locks import path_lock
from rotalog.core.rotation.naming import archive_path, split_name
from rotalog.core.rotation.policy import should_rotate
from rotalog.core.rotation.retention import enforce_retention
from rotalog.domain.config import LogFileConfig
from rotalog.domain.constants import (
    DEFAULT_CODE,
    DEFAULT_DELIMITER,
    DEFAULT_ENCODING,
    DEFAULT_ENFORCE_RETENTION,
    DEFAULT_LEVEL,
    DEFAULT_MAX_FILES,
    DEFAULT_MAX_SIZE,
)
from rotalog.domain.errors import NameCollisionError
from rotalog.domain.records import LogRecord, format_header, format_record
from rotalog.domain.write_models import RetentionResult, WriteOutcome
from rotalog.infra.fs import ensure_writable, split_log_path, touch_now
from rotalog.infra.identity import IdentityProvider, get_current_user, resolve_user

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def log_message(
        path: str,
        message: str,
        *,
        level: object = DEFAULT_LEVEL,
        code: int = DEFAULT_CODE,
        delimiter: str = DEFAULT_DELIMITER,
        max_size: int = DEFAULT_MAX_SIZE,
        enforce_retention: bool = DEFAULT_ENFORCE_RETENTION,
        max_files: int = DEFAULT_MAX_FILES,
        encoding: object = DEFAULT_ENCODING,
        identity_provider: IdentityProvider = get_current_user,
        clock: Clock = datetime.now,
) -> WriteOutcome:
    """
    Append one record to a delimited log file, rotating it when needed.

    Convenience wrapper building the LogFileConfig from keyword arguments.

    Raises:
        ConfigurationError: If a configuration value is invalid.
        InvalidRecordError: If the level is unknown or the message empty.
        PathInaccessibleError: If the log file cannot be written.
        NameCollisionError: If the archive name is already taken.
    """
    config = LogFileConfig(
        path=path,
        delimiter=delimiter,
        max_size=max_size,
        enforce_retention=enforce_retention,
        max_files=max_files,
        encoding=encoding,  # type: ignore[arg-type]
    )
    return write_log(
        config,
        message,
        level=level,
        code=code,
        identity_provider=identity_provider,
        clock=clock,
    )


def write_log(
        config: LogFileConfig,
        message: str,
        *,
        level: object = DEFAULT_LEVEL,
        code: int = DEFAULT_CODE,
        identity_provider: IdentityProvider = get_current_user,
        clock: Clock = datetime.now,
) -> WriteOutcome:
    """
    Build a record attributed to the current user and write it.

    Args:
        config: Target file and rotation rules.
        message: Record message (non-empty).
        level: Record severity (enum member or name).
        code: Numeric record code.
        identity_provider: Callable resolving the principal name.
        clock: Source of the current time (record stamp and archive name).

    Returns:
        WriteOutcome: What the call did to the file system.
    """
    record = LogRecord.create(
        message,
        level=level,
        code=code,
        user=resolve_user(identity_provider),
        now=clock(),
    )
    return write_record(record, config, clock=clock)


def write_record(
        record: LogRecord,
        config: LogFileConfig,
        *,
        clock: Clock = datetime.now,
) -> WriteOutcome:
    """
    Write a prepared record, creating or rotating the active file first.

    Args:
        record: The record to append.
        config: Target file and rotation rules.
        clock: Source of the rotation time.

    Returns:
        WriteOutcome: What the call did to the file system.
    """
    path = os.path.abspath(config.path)
    parent_dir, file_name = split_log_path(path)
    stem, _ = split_name(file_name)
    codec = config.encoding.codec

    header = format_header(config.delimiter)
    row = format_record(record, config.delimiter)

    created = False
    archive = ""
    retention = RetentionResult()

    with path_lock(path):
        if not os.path.exists(path):
            ensure_writable(path)
            _create_with_header(path, header, codec)
            created = True
            logger.debug(f"Created log file {path}")
        else:
            if os.path.isdir(path):
                ensure_writable(path)
            size = os.path.getsize(path)
            if should_rotate(size, config.max_size):
                ensure_writable(path)
                archive = _rotate(path, clock())
                _create_with_header(path, header, codec)
                touch_now(path)
                logger.info(f"Rotated {path} ({size} bytes) to {archive}")

                if config.enforce_retention:
                    retention = enforce_retention(
                        parent_dir, stem, config.max_files, exclude=[path]
                    )
            else:
                logger.debug(f"Appending to {path} ({size}/{config.max_size} bytes)")

        _append_line(path, row, codec)

    return WriteOutcome(
        path=path,
        created=created,
        rotated=bool(archive),
        archive_path=archive,
        deleted_archives=list(retention.deleted),
        retention_failures=list(retention.failures),
    )


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _rotate(path: str, now: datetime) -> str:
    """
    Move the active file aside under its archive name.

    Raises:
        NameCollisionError: If the archive name already exists.
    """
    target = archive_path(path, now)
    if os.path.exists(target):
        raise NameCollisionError(target)
    try:
        os.rename(path, target)
    except FileExistsError as e:
        raise NameCollisionError(target) from e
    return target


def _create_with_header(path: str, header: str, codec: str) -> None:
    """Create a new, empty log file and write the header line to it."""
    with open(path, "x", encoding=codec) as f:
        f.write(f"{header}\n")


def _append_line(path: str, line: str, codec: str) -> None:
    with open(path, "a", encoding=codec) as f:
        f.write(f"{line}\n")
