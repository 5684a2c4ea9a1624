from __future__ import annotations

"""Size-based rotation decision."""


def should_rotate(current_size_bytes: int, max_size_bytes: int) -> bool:
    """
    Decide whether the active file must be archived before the next write.

    Reaching the threshold exactly already rotates. A threshold of 0 rotates
    on every write once the file exists.

    Args:
        current_size_bytes: Size of the active file.
        max_size_bytes: Rotation threshold.

    Returns:
        bool: True if rotation is required.
    """
    return current_size_bytes >= max_size_bytes
