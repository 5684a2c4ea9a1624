from __future__ import annotations

"""
Archive Retention.

Caps the number of archives kept for a log file's base name. Archives are
removed oldest first (by creation time, ties broken by name). Cleanup is
best-effort: deletion failures are logged and reported, never raised.
"""

import logging
import os
from typing import Iterable, List, Set, Tuple

from rotalog.domain.write_models import RetentionResult
from rotalog.infra.fs import get_creation_time

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def list_retention_set(
        parent_dir: str,
        stem: str,
        exclude: Iterable[str] = (),
) -> List[str]:
    """
    List the files in 'parent_dir' whose name starts with 'stem', oldest first.

    Args:
        parent_dir: Directory holding the active file and its archives.
        stem: Base name without extension.
        exclude: Paths left out of the set (typically the active file).

    Returns:
        List[str]: Absolute paths ordered by (creation time, name).
    """
    excluded: Set[str] = {os.path.normcase(os.path.abspath(p)) for p in exclude}
    entries: List[Tuple[float, str, str]] = []

    try:
        names = os.listdir(parent_dir)
    except OSError as e:
        logger.warning(f"Cannot list '{parent_dir}' for retention: {e}")
        return []

    for name in names:
        if not name.startswith(stem):
            continue
        full = os.path.abspath(os.path.join(parent_dir, name))
        if os.path.normcase(full) in excluded or not os.path.isfile(full):
            continue
        try:
            created = get_creation_time(full)
        except OSError:
            # Vanished between listdir and stat
            continue
        entries.append((created, name, full))

    entries.sort()
    return [full for _, _, full in entries]


def enforce_retention(
        parent_dir: str,
        stem: str,
        max_files: int,
        exclude: Iterable[str] = (),
) -> RetentionResult:
    """
    Delete the oldest archives until at most 'max_files' remain.

    The set is recomputed after every deletion. Entries that cannot be
    deleted are reported in the result and skipped, so the pass always
    terminates.

    Args:
        parent_dir: Directory holding the archives.
        stem: Base name without extension shared by the archives.
        max_files: Number of archives to keep.
        exclude: Paths never considered for deletion.

    Returns:
        RetentionResult: Deleted paths and failure descriptions.
    """
    if not stem:
        # An empty stem would match every file in the directory
        logger.warning(f"Retention skipped in '{parent_dir}': log file name has no stem.")
        return RetentionResult()

    excluded = list(exclude)
    deleted: List[str] = []
    failures: List[str] = []
    # Undeletable archives still count towards the cap
    stuck = 0

    while True:
        candidates = list_retention_set(parent_dir, stem, excluded)
        if not candidates or len(candidates) + stuck <= max_files:
            break

        oldest = candidates[0]
        try:
            os.remove(oldest)
        except FileNotFoundError:
            logger.debug(f"Archive already removed: {oldest}")
        except OSError as e:
            msg = f"Could not delete archive '{oldest}': {e}"
            logger.warning(msg)
            failures.append(msg)
            excluded.append(oldest)
            stuck += 1
        else:
            logger.info(f"Deleted archive {oldest}")
            deleted.append(oldest)

    return RetentionResult(deleted=deleted, failures=failures)
