from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class LatticeState:
    """A point of the search lattice.

    Keep this dataclass logic-free; transitions belong in lattice/engine.py.
    """

    x: int      # items decided
    y: int      # cumulative cost
    z: int      # cumulative weight


ORIGIN = LatticeState(0, 0, 0)


@dataclass(frozen=True)
class Capacity:
    """Lattice dimensions: a query needs n < max_x, cost < max_y, weight < max_z."""

    max_x: int = 501
    max_y: int = 101
    max_z: int = 101

    def __post_init__(self) -> None:
        for name in ("max_x", "max_y", "max_z"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int) or v < 1:
                raise ValueError(f"Capacity.{name} must be an int >= 1, got {v!r}")
