"""Internal shared utilities for encsniff."""

from __future__ import annotations

#: Number of bytes read from a stream per chunk during range detection.
BUFFER_SIZE: int = 65_536


def _validate_chunk_size(chunk_size: int) -> None:
    """Raise ValueError if *chunk_size* is not a positive integer."""
    if (
        isinstance(chunk_size, bool)
        or not isinstance(chunk_size, int)
        or chunk_size < 1
    ):
        msg = "chunk_size must be a positive integer"
        raise ValueError(msg)


def _validate_non_negative(name: str, value: int) -> None:
    """Raise ValueError if *value* is not a non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"{name} must be a non-negative integer"
        raise ValueError(msg)
