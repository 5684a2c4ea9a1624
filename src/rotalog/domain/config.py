from __future__ import annotations

"""
Configuration Domain Management.

Defines the per-call log file configuration model and the persisted JSON
defaults file that lets users change the fallback values once instead of
passing them on every call.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from rotalog.domain.constants import (
    DEFAULT_DELIMITER,
    DEFAULT_ENCODING,
    DEFAULT_ENFORCE_RETENTION,
    DEFAULT_MAX_FILES,
    DEFAULT_MAX_SIZE,
    LogEncoding,
)
from rotalog.domain.errors import ConfigurationError
from rotalog.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


# -----------------------------------------------------------------------------
# Configuration Model
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LogFileConfig:
    """
    Immutable description of the target log file and its rotation rules.

    Attributes:
        path: Active log file path (absolute or relative).
        delimiter: Single character separating columns.
        max_size: Size threshold in bytes; reaching it triggers rotation.
        enforce_retention: Whether archives beyond max_files are pruned.
        max_files: Number of archives kept per base name.
        encoding: Text encoding of the file.
    """
    path: str
    delimiter: str = DEFAULT_DELIMITER
    max_size: int = DEFAULT_MAX_SIZE
    enforce_retention: bool = DEFAULT_ENFORCE_RETENTION
    max_files: int = DEFAULT_MAX_FILES
    encoding: LogEncoding = field(default=DEFAULT_ENCODING)

    def __post_init__(self) -> None:
        if not isinstance(self.path, str) or not self.path.strip():
            raise ConfigurationError("Log file path must be a non-empty string.")
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise ConfigurationError(
                f"Delimiter must be a single character, received {self.delimiter!r}."
            )
        if self.delimiter in ("\n", "\r"):
            raise ConfigurationError("Delimiter cannot be a line break.")
        if _is_bad_int(self.max_size) or self.max_size < 0:
            raise ConfigurationError(f"max_size must be a non-negative integer, received {self.max_size!r}.")
        if _is_bad_int(self.max_files) or self.max_files < 0:
            raise ConfigurationError(f"max_files must be a non-negative integer, received {self.max_files!r}.")
        if not isinstance(self.encoding, LogEncoding):
            try:
                object.__setattr__(self, "encoding", LogEncoding.parse(self.encoding))
            except ValueError as e:
                raise ConfigurationError(str(e)) from e

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogFileConfig":
        """Build a config from a plain dictionary, ignoring unknown keys."""
        known = {"path", "delimiter", "max_size", "enforce_retention", "max_files", "encoding"}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "delimiter": self.delimiter,
            "max_size": self.max_size,
            "enforce_retention": self.enforce_retention,
            "max_files": self.max_files,
            "encoding": self.encoding.value,
        }


def _is_bad_int(value: Any) -> bool:
    return isinstance(value, bool) or not isinstance(value, int)


# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default configuration values (everything except the path).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "delimiter": DEFAULT_DELIMITER,
        "max_size": DEFAULT_MAX_SIZE,
        "enforce_retention": DEFAULT_ENFORCE_RETENTION,
        "max_files": DEFAULT_MAX_FILES,
        "encoding": DEFAULT_ENCODING.value,
    }


def get_config_file() -> str:
    """Resolve the persisted defaults file inside the user data directory."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load persisted default values merged over the built-in defaults.

    Missing or corrupted files fall back to the built-in defaults.

    Args:
        config_file: Optional explicit location of the JSON file.

    Returns:
        Dict[str, Any]: The effective default values.
    """
    defaults = get_default_config()
    path = config_file or get_config_file()

    if not os.path.exists(path):
        logger.debug("Config file not found. Returning defaults.")
        return defaults

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return defaults

    defaults.update({k: v for k, v in data.items() if k in defaults})
    return defaults


def save_config(config: Dict[str, Any], config_file: Optional[str] = None) -> None:
    """
    Persist default values to disk. Only known keys are written.

    Args:
        config: Values to persist.
        config_file: Optional explicit location of the JSON file.
    """
    path = config_file or get_config_file()
    payload = {k: config[k] for k in get_default_config() if k in config}
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
