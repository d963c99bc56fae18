"""
Item and problem models for the dual-budget reachability query.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from lattice.errors import InputValidationError


def _is_int(v: object) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


@dataclass(frozen=True)
class Item:
    """
    One purchasable product.

    Attributes
    ----------
    price : int
        Nonnegative cost added to the running cost sum when bought.
    calories : int
        Nonnegative weight added to the running weight sum when bought.
    """
    price: int
    calories: int

    def __post_init__(self) -> None:  # type: ignore[override]
        if not _is_int(self.price) or self.price < 0:
            raise InputValidationError(f"Item price must be an int >= 0, got {self.price!r}")
        if not _is_int(self.calories) or self.calories < 0:
            raise InputValidationError(f"Item calories must be an int >= 0, got {self.calories!r}")


@dataclass(frozen=True)
class Problem:
    """
    Immutable query: n items in index order and the exact targets to hit.
    """
    n: int
    target_cost: int
    target_weight: int
    items: Tuple[Item, ...]

    def __post_init__(self) -> None:  # type: ignore[override]
        for name in ("n", "target_cost", "target_weight"):
            v = getattr(self, name)
            if not _is_int(v) or v < 0:
                raise InputValidationError(f"Problem.{name} must be an int >= 0, got {v!r}")
        if len(self.items) != self.n:
            raise InputValidationError(
                f"Problem declares n={self.n} but carries {len(self.items)} items"
            )
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def costs(self) -> Tuple[int, ...]:
        return tuple(it.price for it in self.items)

    @property
    def weights(self) -> Tuple[int, ...]:
        return tuple(it.calories for it in self.items)
