from __future__ import annotations

from .naming import archive_name, archive_path, split_name
from .policy import should_rotate
from .retention import enforce_retention, list_retention_set

__all__ = [
    "should_rotate",
    "archive_name",
    "archive_path",
    "split_name",
    "enforce_retention",
    "list_retention_set",
]
