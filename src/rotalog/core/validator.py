from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper between untrusted input (CLI arguments, the persisted
defaults file) and the write engine. Handles type coercion and default value
injection, producing a validated LogFileConfig plus human-readable warnings.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from rotalog.domain.config import LogFileConfig, get_default_config
from rotalog.domain.constants import DEFAULT_ENCODING, LogEncoding
from rotalog.domain.errors import ConfigurationError
from rotalog.infra.fs import normalize_path

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        defaults: Optional[Dict[str, Any]] = None,
        strict: bool = False,
) -> Tuple[LogFileConfig, List[str]]:
    """
    Validate and normalize a raw configuration dictionary.

    Invalid option values fall back to the defaults (with a warning) unless
    'strict' is set. The 'defaults' layer is itself untrusted: its invalid
    values fall back to the built-in defaults. A missing path is always an
    error since there is no meaningful fallback for it.

    Args:
        config: Raw configuration data (usually a dictionary).
        defaults: Fallback values; the built-in defaults when omitted.
        strict: If True, raise instead of coercing.

    Returns:
        Tuple[LogFileConfig, List[str]]: The validated config and warnings.

    Raises:
        ConfigurationError: If the path is missing, or on any invalid value in strict mode.
    """
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Invalid config type: expected dict, received {type(config).__name__}."
        )

    warnings: List[str] = []
    base = get_default_config()
    if defaults:
        saved_warnings: List[str] = []
        base = _coerce_options(defaults, base, saved_warnings, strict)
        warnings.extend(f"Saved default: {w}" for w in saved_warnings)

    path_value = config.get("path")
    if path_value is None and defaults:
        path_value = defaults.get("path")
    path = normalize_path(path_value if isinstance(path_value, str) else None)
    if not path:
        raise ConfigurationError("A log file path is required.")

    options = _coerce_options(config, base, warnings, strict)

    for w in warnings:
        logger.debug(f"Configuration warning: {w}")

    return LogFileConfig(path=path, **options), warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _coerce_options(
        raw: Dict[str, Any],
        fallback: Dict[str, Any],
        warnings: List[str],
        strict: bool,
) -> Dict[str, Any]:
    """Coerce every option key of 'raw', taking missing or invalid values from 'fallback'."""
    merged = dict(fallback)
    merged.update({k: v for k, v in raw.items() if v is not None})

    return {
        "delimiter": _as_delimiter(merged.get("delimiter"), fallback["delimiter"], warnings, strict),
        "max_size": _as_non_negative_int(merged.get("max_size"), fallback["max_size"], "max_size", warnings, strict),
        "max_files": _as_non_negative_int(
            merged.get("max_files"), fallback["max_files"], "max_files", warnings, strict
        ),
        "enforce_retention": _as_bool(
            merged.get("enforce_retention"), fallback["enforce_retention"], "enforce_retention", warnings, strict
        ),
        "encoding": _as_encoding(merged.get("encoding"), fallback["encoding"], warnings, strict),
    }


def _reject(msg: str, warnings: List[str], strict: bool) -> None:
    if strict:
        raise ConfigurationError(msg)
    warnings.append(f"{msg} Using fallback.")


def _as_delimiter(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Accept exactly one character other than a line break."""
    if isinstance(value, str) and len(value) == 1 and value not in ("\n", "\r"):
        return value
    if isinstance(value, str) and value.lower() in ("\\t", "tab"):
        return "\t"
    _reject(f"Invalid delimiter {value!r}: expected a single character.", warnings, strict)
    return fallback


def _as_non_negative_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce integers and numeric strings; reject negatives and booleans."""
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value

    if isinstance(value, str) and not strict:
        s = value.strip()
        if s.isdigit():
            warnings.append(f"Field '{field}' converted from '{value}' to {int(s)}.")
            return int(s)

    _reject(f"Invalid field '{field}': expected a non-negative integer, received {value!r}.", warnings, strict)
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    _reject(f"Invalid field '{field}': expected bool, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_encoding(value: Any, fallback: Any, warnings: List[str], strict: bool) -> LogEncoding:
    try:
        return LogEncoding.parse(value)
    except ValueError as e:
        _reject(str(e), warnings, strict)
    try:
        return LogEncoding.parse(fallback)
    except ValueError:
        return DEFAULT_ENCODING
