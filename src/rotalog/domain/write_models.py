from __future__ import annotations

"""
Write Domain Data Models.

Result objects describing what a single write call or retention pass did,
exchanged between the rotation engine and its callers (library and CLI).
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class RetentionResult:
    """
    Outcome of a retention pass.

    Attributes:
        deleted: Archive paths removed, oldest first.
        failures: Human-readable descriptions of archives that could not be removed.
    """
    deleted: List[str] = field(default_factory=list)
    failures: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class WriteOutcome:
    """
    Outcome of a single successful write call.

    Attributes:
        path: Active log file that received the record.
        created: True if the active file did not exist before the call.
        rotated: True if the previous active file was archived.
        archive_path: Archive created by the rotation, empty otherwise.
        deleted_archives: Archives removed by retention during this call.
        retention_failures: Archives retention could not remove.
    """
    path: str
    created: bool = False
    rotated: bool = False
    archive_path: str = ""
    deleted_archives: List[str] = field(default_factory=list)
    retention_failures: List[str] = field(default_factory=list)
