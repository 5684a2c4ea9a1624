from __future__ import annotations

"""
Integration tests for the Diagnostics Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
isolation from the root logger and diagnostics file output.
"""

import logging
from pathlib import Path

import pytest

from rotalog.infra.logging import (
    LoggingConfig,
    configure_logging,
    shutdown_logging,
)
from rotalog.infra.logging.core import _QUEUE_LISTENER_ATTR
from rotalog.infra.logging.handlers import _HANDLER_TAG_ATTR


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach rotalog handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def test_logging_idempotency() -> None:
    """TC-01: Multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    pkg = logging.getLogger("rotalog")
    initial = len(pkg.handlers)

    configure_logging(cfg)
    assert len(pkg.handlers) == initial


def test_handlers_are_tagged_and_root_untouched() -> None:
    root_before = list(logging.getLogger().handlers)

    configure_logging(LoggingConfig(level="DEBUG", console=True))
    pkg = logging.getLogger("rotalog")

    assert all(getattr(h, _HANDLER_TAG_ATTR, False) for h in pkg.handlers)
    assert logging.getLogger().handlers == root_before
    assert pkg.level == logging.DEBUG


def test_force_reconfigures_level() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="ERROR"), force=True)
    assert logging.getLogger("rotalog").level == logging.ERROR


def test_diagnostics_written_to_file(tmp_path: Path) -> None:
    """TC-02: Records reach the rotating diagnostics file through the queue."""
    diag = tmp_path / "diag" / "rotalog.log"
    configure_logging(LoggingConfig(level="INFO", console=False, log_file=str(diag)))

    logging.getLogger("rotalog.core.writer").info("rotation happened")

    listener = getattr(logging.getLogger("rotalog"), _QUEUE_LISTENER_ATTR)
    listener.stop()  # drains the queue
    setattr(logging.getLogger("rotalog"), _QUEUE_LISTENER_ATTR, None)
    for h in listener.handlers:
        h.close()

    content = diag.read_text(encoding="utf-8")
    assert "rotation happened" in content
    assert "rotalog.core.writer" in content


def test_unwritable_diag_file_degrades_to_console(tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a dir", encoding="utf-8")

    configure_logging(LoggingConfig(console=True, log_file=str(blocker / "diag.log")))

    assert "Diagnostics file unavailable" in capsys.readouterr().err
    assert logging.getLogger("rotalog").handlers


@pytest.mark.parametrize("name, expected", [
    ("debug", logging.DEBUG),
    ("WARN", logging.WARNING),
    ("Error", logging.ERROR),
    ("verbose", logging.WARNING),
    ("", logging.WARNING),
])
def test_level_names_resolve(name: str, expected: int) -> None:
    assert LoggingConfig(level=name).level_no == expected


def test_cli_config_follows_debug_flag(tmp_path: Path) -> None:
    assert LoggingConfig.for_cli(False).level_no == logging.WARNING
    cfg = LoggingConfig.for_cli(True, str(tmp_path / "diag.log"))
    assert cfg.level_no == logging.DEBUG
    assert cfg.console is True
    assert cfg.log_file == str(tmp_path / "diag.log")
