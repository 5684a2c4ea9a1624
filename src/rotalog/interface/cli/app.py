from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: diagnostics bootstrap, merging of the
configuration sources (built-in defaults, persisted defaults and CLI
overrides), validation, and the write call itself. Write failures are
reported on stderr with a non-zero exit code instead of a traceback.
"""

import json
import sys
from typing import List, Optional

from rotalog.core.validator import validate_config
from rotalog.core.writer import write_log
from rotalog.domain.config import get_default_config, load_config
from rotalog.domain.errors import ConfigurationError, InvalidRecordError, RotalogError
from rotalog.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_diag_log_path,
    get_logger,
)
from rotalog.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_WRITE_FAILED = 1
EXIT_USAGE = 2

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 if the write failed, 2 on invalid input.
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Diagnostics bootstrap
    diag_file = args.diag_log
    if diag_file == "":
        diag_file = get_default_diag_log_path()
    configure_logging(LoggingConfig.for_cli(args.debug, diag_file), force=True)

    # 3. Resolve base configuration (built-in vs persisted defaults)
    defaults = get_default_config() if args.use_defaults else load_config()

    # 4. Validation of the merged configuration
    try:
        config, warnings = validate_config(cli_args.args_to_overrides(args), defaults=defaults)
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(config.to_dict(), ensure_ascii=False, indent=2))
        return EXIT_OK

    if not args.message:
        print("ERROR: A message is required.", file=sys.stderr)
        return EXIT_USAGE

    # 5. Write phase
    try:
        write_log(config, args.message, level=args.level, code=args.code)
    except InvalidRecordError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE
    except (RotalogError, OSError) as e:
        logger.debug("Write failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_WRITE_FAILED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
