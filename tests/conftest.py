from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for deterministic clocks, identities and log paths.
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
FIXED_NOW = datetime(2024, 5, 17, 14, 30, 45, 123456)


@pytest.fixture
def fixed_now() -> datetime:
    """The moment returned by the 'clock' fixture."""
    return FIXED_NOW


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """Deterministic clock frozen at FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def user() -> Callable[[], str]:
    """Identity provider returning a fixed principal."""
    return lambda: "tester"


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    """Path of a not-yet-existing log file inside a writable directory."""
    return tmp_path / "mylog.log"
