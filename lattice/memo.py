from __future__ import annotations

from typing import Tuple
import numpy as np

from lattice.errors import MemoInvariantError, StateOutOfBoundsError
from lattice.state import LatticeState

# ─────────────────────────────────────────────────────────────
# Cell statuses
# ─────────────────────────────────────────────────────────────
UNKNOWN = 0     # never expanded
DEAD = 1        # expanded, nothing found beneath it


class MemoTable:
    """
    Dense status table over a lattice of shape (x, y, z).

    Every cell starts UNKNOWN and may become DEAD exactly once. The table
    belongs to a single query; marks are only meaningful for the target the
    search was run against.
    """

    def __init__(self, shape: Tuple[int, int, int]):
        if len(shape) != 3 or any(int(d) < 1 for d in shape):
            raise ValueError(f"MemoTable shape must be three dims >= 1, got {shape}")
        self.shape = tuple(int(d) for d in shape)
        self._cells = np.zeros(self.shape, dtype=np.uint8)

    def _index(self, state: LatticeState) -> Tuple[int, int, int]:
        idx = (state.x, state.y, state.z)
        for v, dim in zip(idx, self.shape):
            if v < 0 or v >= dim:
                raise StateOutOfBoundsError(f"{state} outside memo lattice {self.shape}")
        return idx

    def status(self, state: LatticeState) -> int:
        return int(self._cells[self._index(state)])

    def is_dead(self, state: LatticeState) -> bool:
        return self.status(state) == DEAD

    def mark_dead(self, state: LatticeState) -> None:
        idx = self._index(state)
        if self._cells[idx] == DEAD:
            raise MemoInvariantError(f"{state} is already dead")
        self._cells[idx] = DEAD

    def dead_count(self) -> int:
        return int(np.count_nonzero(self._cells == DEAD))

    def reset(self) -> None:
        """Return every cell to UNKNOWN."""
        self._cells.fill(UNKNOWN)
