from __future__ import annotations

"""
Diagnostics Logging Orchestrator.

Maintains the idempotent lifecycle of rotalog's diagnostic logging. File
output is moved off the calling thread through a QueueHandler/QueueListener
pair, so diagnostics never add latency to the writes they describe.
"""

import atexit
import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from rotalog.infra.fs import get_user_data_dir
from rotalog.infra.logging.config import (
    CONSOLE_FORMAT,
    FILE_DATE_FORMAT,
    FILE_FORMAT,
    LoggingConfig,
)
from rotalog.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_rotalog_configured"
_QUEUE_LISTENER_ATTR: str = "_rotalog_queue_listener"

_ROOT_LOGGER_NAME = "rotalog"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_diag_log_path(file_name: str = "rotalog-diagnostics.log") -> str:
    """
    Resolve the standard diagnostics path within the user data directory.

    Returns:
        str: Absolute path to the diagnostics file.
    """
    return os.path.join(get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the 'rotalog' logger hierarchy. Idempotent unless 'force' is set.

    Only the package logger is touched, never the host application's root
    logger.

    Args:
        cfg: Structural configuration for diagnostics.
        force: If True, re-initialize handlers even if already configured.

    Returns:
        logging.Logger: The configured package logger.
    """
    pkg_logger = logging.getLogger(_ROOT_LOGGER_NAME)

    if getattr(pkg_logger, _CONFIGURED_FLAG_ATTR, False) and not force:
        return pkg_logger

    try:
        level_int = cfg.level_no
        pkg_logger.setLevel(level_int)

        _remove_our_handlers(pkg_logger)
        _stop_existing_listener(pkg_logger)

        handlers_list: List[logging.Handler] = []

        if cfg.console:
            sh = logging.StreamHandler(sys.stderr)
            sh.setLevel(level_int)
            sh.setFormatter(logging.Formatter(CONSOLE_FORMAT))
            _tag_handler(sh)
            handlers_list.append(sh)

        if cfg.log_file:
            fh = _create_rotating_file_handler(
                cfg.log_file,
                level_int,
                logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT),
                cfg.max_bytes,
                cfg.backup_count,
            )
            if fh:
                handlers_list.append(fh)

        if not handlers_list:
            setattr(pkg_logger, _CONFIGURED_FLAG_ATTR, True)
            return pkg_logger

        log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
        queue_handler = QueueHandler(log_queue)
        _tag_handler(queue_handler)

        listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
        listener.start()

        pkg_logger.addHandler(queue_handler)
        pkg_logger.propagate = False

        setattr(pkg_logger, _QUEUE_LISTENER_ATTR, listener)
        setattr(pkg_logger, _CONFIGURED_FLAG_ATTR, True)

        atexit.register(_safe_stop_listener, listener)
        return pkg_logger

    except Exception as e:
        # Emergency console fallback; diagnostics must never break a write
        _remove_our_handlers(pkg_logger)
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter("CRITICAL FALLBACK | %(levelname)s | %(message)s"))
        _tag_handler(sh)
        pkg_logger.addHandler(sh)
        pkg_logger.warning(f"Diagnostics setup failed ({e}). Switched to emergency console.")
        return pkg_logger


def shutdown_logging() -> None:
    """Flush and detach every handler installed by configure_logging."""
    pkg_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    _stop_existing_listener(pkg_logger)
    _remove_our_handlers(pkg_logger)
    pkg_logger.propagate = True
    if hasattr(pkg_logger, _CONFIGURED_FLAG_ATTR):
        delattr(pkg_logger, _CONFIGURED_FLAG_ATTR)


def get_logger(name: str) -> logging.Logger:
    """Acquire a named logger (usually __name__)."""
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _remove_our_handlers(target: logging.Logger) -> None:
    for h in list(target.handlers):
        if _is_our_handler(h):
            target.removeHandler(h)
            h.close()


def _stop_existing_listener(target: logging.Logger) -> None:
    listener = getattr(target, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        for h in listener.handlers:
            h.close()
        setattr(target, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a QueueListener, tolerating one that was already stopped."""
    if not listener:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
