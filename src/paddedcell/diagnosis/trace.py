# topmark:header:start
#
#   project      : PaddedCell
#   file         : trace.py
#   file_relpath : src/paddedcell/diagnosis/trace.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bounded trace of the states produced while diagnosing one file.

The trace is a preallocated, fixed-capacity buffer indexed by iteration count.
It never grows past its capacity: appending to a full trace is a programming
error and raises `TraceFullError`.
"""

from __future__ import annotations

from typing import Iterator


class TraceFullError(IndexError):
    """Raised when appending to a trace that already holds ``capacity`` states."""


class Trace:
    """Fixed-capacity sequence of text states (the original is never stored).

    Args:
        capacity (int): Maximum number of states; the padded-cell bound ``N``.

    Raises:
        ValueError: If ``capacity`` is smaller than 1.
    """

    __slots__ = ("_slots", "_size")

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"trace capacity must be >= 1 (got {capacity})")
        self._slots: list[str | None] = [None] * capacity
        self._size: int = 0

    @property
    def capacity(self) -> int:
        """Return the maximum number of states."""
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        for i in range(self._size):
            yield self[i]

    def __getitem__(self, index: int) -> str:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError(f"trace index out of range: {index}")
        value: str | None = self._slots[index]
        assert value is not None
        return value

    def is_full(self) -> bool:
        """Return True when no more states can be appended."""
        return self._size == len(self._slots)

    def append(self, state: str) -> None:
        """Store ``state`` in the next free slot.

        Raises:
            TraceFullError: If the trace is full.
        """
        if self.is_full():
            raise TraceFullError(f"trace is full ({self.capacity} states)")
        self._slots[self._size] = state
        self._size += 1

    def index_of(self, state: str) -> int | None:
        """Return the index of the first occurrence of ``state``, or None."""
        for i in range(self._size):
            if self._slots[i] == state:
                return i
        return None

    def since(self, index: int) -> tuple[str, ...]:
        """Return the states from ``index`` (inclusive) to the end."""
        return tuple(self)[index:]

    def freeze(self) -> tuple[str, ...]:
        """Return an immutable copy of the recorded states."""
        return tuple(self)

    def __repr__(self) -> str:
        return f"Trace(size={self._size}, capacity={self.capacity})"
