from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides. Every option defaults to None so that only values
given explicitly override the persisted defaults.
"""

import argparse
from typing import Any, Dict

from rotalog.domain.constants import LogEncoding, LogLevel

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the rotalog CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="rotalog",
        description="Append a record to a delimited log file, rotating it by size.",
    )

    # --- Record ---
    p.add_argument("path", help="Active log file to append to.")
    p.add_argument("message", nargs="?", default=None, help="Record message (required unless --dump-config).")
    p.add_argument(
        "-l", "--level",
        default=LogLevel.INFO.value,
        type=str.upper,
        choices=[m.value for m in LogLevel],
        help="Record severity (default: INFO).",
    )
    p.add_argument(
        "-c", "--code",
        type=int,
        default=0,
        help="Numeric record code (default: 0).",
    )

    # --- File Format ---
    p.add_argument(
        "-d", "--delimiter",
        default=None,
        help="Single-character column delimiter (default: ',').",
    )
    p.add_argument(
        "-e", "--encoding",
        default=None,
        choices=[m.value for m in LogEncoding],
        help="Text encoding of the log file (default: UTF8).",
    )

    # --- Rotation and Retention ---
    p.add_argument(
        "--max-size",
        dest="max_size",
        type=int,
        default=None,
        help="Rotate when the file reaches this many bytes (default: 104857600).",
    )
    p.add_argument(
        "--max-files",
        dest="max_files",
        type=int,
        default=None,
        help="Archives kept per base name when retention is enforced (default: 10).",
    )
    p.add_argument(
        "--no-retention",
        action="store_true",
        help="Keep every archive instead of pruning the oldest.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted defaults file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate diagnostics verbosity to DEBUG.",
    )
    p.add_argument(
        "--diag-log",
        dest="diag_log",
        nargs="?",
        const="",
        default=None,
        help="Also write diagnostics to FILE (default location if FILE is omitted).",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Only the keys given on the command line, plus 'path'.
    """
    overrides: Dict[str, Any] = {"path": args.path}

    if args.delimiter is not None:
        overrides["delimiter"] = args.delimiter
    if args.encoding is not None:
        overrides["encoding"] = args.encoding
    if args.max_size is not None:
        overrides["max_size"] = args.max_size
    if args.max_files is not None:
        overrides["max_files"] = args.max_files
    if args.no_retention:
        overrides["enforce_retention"] = False

    return overrides
