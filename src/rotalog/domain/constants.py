from __future__ import annotations

"""
Domain Constants and Enumerations.

Provides centralized access to severity levels, supported text encodings,
the fixed header layout and the default values applied to every write call.
"""

import locale
import os
from enum import Enum
from typing import Dict, List

# -----------------------------------------------------------------------------
# DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_DELIMITER = ","
DEFAULT_MAX_SIZE = 104857600  # 100 MB
DEFAULT_ENFORCE_RETENTION = True
DEFAULT_MAX_FILES = 10
DEFAULT_CODE = 0

UNKNOWN_USER = "UNKNOWN"

HEADER_COLUMNS: List[str] = ["Level", "User", "Date", "Code", "LogMessage"]

# Python strftime equivalents of "yyyy-MM-dd HH:mm:ss" and "yyyy-MM-dd-HH-mm-ss"
RECORD_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ARCHIVE_DATE_FORMAT = "%Y-%m-%d-%H-%M-%S"


# -----------------------------------------------------------------------------
# SEVERITY LEVELS
# -----------------------------------------------------------------------------

class LogLevel(str, Enum):
    """Severity attached to a single log record."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @classmethod
    def parse(cls, value: object) -> "LogLevel":
        """
        Resolve a level from an enum member or a case-insensitive name.

        Raises:
            ValueError: If the value does not name a known level.
        """
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().upper()
        if key == "WARN":
            key = "WARNING"
        try:
            return cls[key]
        except KeyError:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown log level '{value}'. Expected one of: {allowed}.") from None

    def __str__(self) -> str:
        return self.value


# -----------------------------------------------------------------------------
# TEXT ENCODINGS
# -----------------------------------------------------------------------------

class LogEncoding(str, Enum):
    """Text encodings selectable for the log file."""

    UNKNOWN = "Unknown"
    STRING = "String"
    UNICODE = "Unicode"
    BIG_ENDIAN_UNICODE = "BigEndianUnicode"
    UTF8 = "UTF8"
    UTF7 = "UTF7"
    UTF32 = "UTF32"
    ASCII = "ASCII"
    DEFAULT = "Default"
    OEM = "OEM"

    @classmethod
    def parse(cls, value: object) -> "LogEncoding":
        """
        Resolve an encoding from an enum member or a case-insensitive name.

        Raises:
            ValueError: If the value does not name a supported encoding.
        """
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().replace("-", "").lower()
        for member in cls:
            if member.value.lower() == key:
                return member
        allowed = ", ".join(m.value for m in cls)
        raise ValueError(f"Unsupported encoding '{value}'. Expected one of: {allowed}.")

    @property
    def codec(self) -> str:
        """Python codec name used when writing the file."""
        fixed = _CODEC_MAP.get(self)
        if fixed:
            return fixed
        if self is LogEncoding.OEM and os.name == "nt":
            return "oem"
        return locale.getpreferredencoding(False)

    def __str__(self) -> str:
        return self.value


# BOM-less variants: appends must never embed a byte-order mark mid-file
_CODEC_MAP: Dict[LogEncoding, str] = {
    LogEncoding.UNKNOWN: "utf-16-le",
    LogEncoding.STRING: "utf-16-le",
    LogEncoding.UNICODE: "utf-16-le",
    LogEncoding.BIG_ENDIAN_UNICODE: "utf-16-be",
    LogEncoding.UTF8: "utf-8",
    LogEncoding.UTF7: "utf-7",
    LogEncoding.UTF32: "utf-32-le",
    LogEncoding.ASCII: "ascii",
}

DEFAULT_LEVEL = LogLevel.INFO
DEFAULT_ENCODING = LogEncoding.UTF8
