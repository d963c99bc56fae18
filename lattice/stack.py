from __future__ import annotations

import numpy as np

from lattice.errors import StackOverflowError, StackUnderflowError
from lattice.state import LatticeState


class TraversalStack:
    """
    LIFO of pending lattice states for the explicit DFS.

    Each state occupies one row of an (rows, 3) int64 buffer. The buffer
    grows by doubling but never beyond `capacity` states; pushing into a full
    stack raises instead of overwriting.
    """

    def __init__(self, capacity: int, initial_size: int = 64):
        if capacity < 1:
            raise ValueError(f"TraversalStack capacity must be >= 1, got {capacity}")
        self.capacity = int(capacity)

        rows = max(1, min(int(initial_size), self.capacity))
        self._data = np.zeros((rows, 3), dtype=np.int64)
        self._size = 0
        self._peak = 0

    def __len__(self):
        return self._size

    @property
    def peak(self) -> int:
        """Largest size reached since construction or the last clear()."""
        return self._peak

    def is_empty(self) -> bool:
        return self._size == 0

    def push(self, state: LatticeState) -> None:
        if self._size >= self.capacity:
            raise StackOverflowError(
                f"traversal stack full ({self.capacity} states); cannot push {state}"
            )
        if self._size == self._data.shape[0]:
            self._grow()

        self._data[self._size] = (state.x, state.y, state.z)
        self._size += 1
        self._peak = max(self._peak, self._size)

    def pop(self) -> LatticeState:
        if self._size == 0:
            raise StackUnderflowError("pop from an empty traversal stack")
        self._size -= 1
        x, y, z = self._data[self._size]
        return LatticeState(int(x), int(y), int(z))

    def clear(self) -> None:
        self._size = 0
        self._peak = 0

    def _grow(self) -> None:
        rows = min(self._data.shape[0] * 2, self.capacity)
        grown = np.zeros((rows, 3), dtype=np.int64)
        grown[: self._size] = self._data[: self._size]
        self._data = grown
