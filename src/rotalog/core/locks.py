from __future__ import annotations

"""
Per-Path Write Serialization.

Process-local mutexes keyed by the absolute, case-normalized log path, so
threads writing to the same file never interleave the existence check,
rotation and append. There is no cross-process coordination.
"""

import os
import threading
from contextlib import contextmanager
from typing import Dict, Iterator

_registry_lock = threading.Lock()
_path_locks: Dict[str, threading.Lock] = {}


def _key(path: str) -> str:
    return os.path.normcase(os.path.abspath(path))


def get_path_lock(path: str) -> threading.Lock:
    """Return the lock guarding 'path', creating it on first use."""
    key = _key(path)
    with _registry_lock:
        lock = _path_locks.get(key)
        if lock is None:
            lock = threading.Lock()
            _path_locks[key] = lock
        return lock


@contextmanager
def path_lock(path: str) -> Iterator[None]:
    """Hold the path's lock for the duration of the block."""
    lock = get_path_lock(path)
    with lock:
        yield
