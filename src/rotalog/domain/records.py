from __future__ import annotations

"""
Log Record Domain Model and Row Formatting.

Defines the immutable record submitted on each write call and the helpers
turning records and the fixed header into delimited text rows.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Sequence

from rotalog.domain.constants import HEADER_COLUMNS, RECORD_DATE_FORMAT, LogLevel
from rotalog.domain.errors import InvalidRecordError

# -----------------------------------------------------------------------------
# RECORD MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LogRecord:
    """
    A single entry destined for the log file.

    Attributes:
        level: Record severity.
        user: Principal the record is attributed to.
        timestamp: Creation time formatted as 'yyyy-MM-dd HH:mm:ss.fff'.
        code: Caller-defined numeric code.
        message: Free-text message (must not be empty).
    """
    level: LogLevel
    user: str
    timestamp: str
    code: int
    message: str

    def __post_init__(self) -> None:
        if not isinstance(self.message, str) or not self.message.strip():
            raise InvalidRecordError("Log message must be a non-empty string.")
        if isinstance(self.code, bool) or not isinstance(self.code, int):
            raise InvalidRecordError(f"Log code must be an integer, received {self.code!r}.")

    @classmethod
    def create(
            cls,
            message: str,
            *,
            level: object = LogLevel.INFO,
            code: int = 0,
            user: str,
            now: Optional[datetime] = None,
    ) -> "LogRecord":
        """
        Build a record stamped with the current (or supplied) time.

        Raises:
            InvalidRecordError: On unknown levels, non-integer codes or empty messages.
        """
        try:
            parsed_level = LogLevel.parse(level)
        except ValueError as e:
            raise InvalidRecordError(str(e)) from e
        return cls(
            level=parsed_level,
            user=user,
            timestamp=format_timestamp(now or datetime.now()),
            code=code,
            message=message,
        )

    def fields(self) -> List[str]:
        """Return the record as its ordered column values."""
        return [self.level.value, self.user, self.timestamp, str(self.code), self.message]


# -----------------------------------------------------------------------------
# ROW FORMATTING
# -----------------------------------------------------------------------------

def format_timestamp(moment: datetime) -> str:
    """Render a datetime with millisecond precision."""
    return f"{moment.strftime(RECORD_DATE_FORMAT)}.{moment.microsecond // 1000:03d}"


def format_row(values: Sequence[str], delimiter: str) -> str:
    """Join column values with the delimiter. No quoting is applied."""
    return delimiter.join(values)


def format_header(delimiter: str) -> str:
    return format_row(HEADER_COLUMNS, delimiter)


def format_record(record: LogRecord, delimiter: str) -> str:
    return format_row(record.fields(), delimiter)
