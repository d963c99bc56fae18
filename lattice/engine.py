from __future__ import annotations

from dataclasses import dataclass
import numbers
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

from lattice.errors import InputValidationError, SearchBudgetExceeded
from lattice.items import Problem
from lattice.memo import MemoTable
from lattice.metrics import SearchStats
from lattice.stack import TraversalStack
from lattice.state import ORIGIN, Capacity, LatticeState


@dataclass
class SearchResult:
    found: bool
    stats: SearchStats


def _as_count(v: Any) -> Optional[int]:
    # numpy integers are Integral; bools (python or numpy) are not counts.
    if isinstance(v, (bool, np.bool_)) or not isinstance(v, numbers.Integral):
        return None
    return int(v)


def _check_count(name: str, v: Any, limit: int) -> int:
    count = _as_count(v)
    if count is None:
        raise InputValidationError(f"{name} must be an int, got {v!r}")
    if count < 0:
        raise InputValidationError(f"{name} must be >= 0, got {count}")
    if count > limit:
        raise InputValidationError(f"{name}={count} exceeds configured capacity (max {limit})")
    return count


def _check_entries(name: str, seq: Sequence[int], n: int) -> Tuple[int, ...]:
    if len(seq) != n:
        raise InputValidationError(f"{name} has {len(seq)} entries but n={n}")
    out = []
    for i, v in enumerate(seq):
        entry = _as_count(v)
        if entry is None or entry < 0:
            raise InputValidationError(f"{name}[{i}] must be an int >= 0, got {v!r}")
        out.append(entry)
    return tuple(out)


class SearchEngine:
    """Explicit-stack DFS with a dead-state memo over the (items, cost, weight) lattice."""

    def __init__(
        self,
        capacity: Optional[Capacity] = None,
        skip_first: bool = True,
        max_steps: Optional[int] = None,
    ):
        self.capacity = capacity or Capacity()
        self.skip_first = bool(skip_first)
        if max_steps is not None and int(max_steps) < 1:
            raise ValueError(f"max_steps must be >= 1 or None, got {max_steps}")
        self.max_steps = int(max_steps) if max_steps is not None else None

    def validate(
        self,
        n: int,
        target_cost: int,
        target_weight: int,
        costs: Sequence[int],
        weights: Sequence[int],
    ) -> Tuple[int, int, int, Tuple[int, ...], Tuple[int, ...]]:
        """Check a query against the capacity and return it as plain ints."""
        cap = self.capacity
        n = _check_count("n", n, cap.max_x - 1)
        target_cost = _check_count("target_cost", target_cost, cap.max_y - 1)
        target_weight = _check_count("target_weight", target_weight, cap.max_z - 1)
        return (
            n,
            target_cost,
            target_weight,
            _check_entries("costs", costs, n),
            _check_entries("weights", weights, n),
        )

    def run(
        self,
        n: int,
        target_cost: int,
        target_weight: int,
        costs: Sequence[int],
        weights: Sequence[int],
    ) -> SearchResult:
        n, target_cost, target_weight, costs, weights = self.validate(
            n, target_cost, target_weight, costs, weights
        )

        # Fresh working storage per query: dead marks are only valid for this target.
        shape = (n + 1, target_cost + 1, target_weight + 1)
        memo = MemoTable(shape)
        stack = TraversalStack(capacity=shape[0] * shape[1] * shape[2] + 1)
        stats = SearchStats()

        target = LatticeState(n, target_cost, target_weight)

        stack.push(ORIGIN)
        stats.pushes += 1

        found = False
        while not stack.is_empty():
            if self.max_steps is not None and stats.pops >= self.max_steps:
                stats.peak_stack = stack.peak
                raise SearchBudgetExceeded(
                    f"search stopped after {stats.pops} steps (max_steps={self.max_steps})"
                )

            s = stack.pop()
            stats.pops += 1

            if s == target:
                found = True
                break

            if memo.is_dead(s):
                stats.dead_hits += 1
                continue

            if s.x < n:
                skip = LatticeState(s.x + 1, s.y, s.z)
                buy_y = s.y + costs[s.x]
                buy_z = s.z + weights[s.x]
                buy = None
                if buy_y <= target_cost and buy_z <= target_weight:
                    buy = LatticeState(s.x + 1, buy_y, buy_z)

                # Last pushed pops first.
                order = (buy, skip) if self.skip_first else (skip, buy)
                for nxt in order:
                    if nxt is not None:
                        stack.push(nxt)
                        stats.pushes += 1

            memo.mark_dead(s)
            stats.expansions += 1

        stats.peak_stack = stack.peak
        return SearchResult(found=found, stats=stats)

    def solve(
        self,
        n: int,
        target_cost: int,
        target_weight: int,
        costs: Sequence[int],
        weights: Sequence[int],
    ) -> bool:
        """True iff some 0/1 choice over the n items hits both targets exactly."""
        return self.run(n, target_cost, target_weight, costs, weights).found

    def solve_problem(self, problem: Problem) -> bool:
        return self.solve(
            problem.n,
            problem.target_cost,
            problem.target_weight,
            problem.costs,
            problem.weights,
        )


def solve(
    n: int,
    target_cost: int,
    target_weight: int,
    costs: Sequence[int],
    weights: Sequence[int],
    *,
    capacity: Optional[Capacity] = None,
    skip_first: bool = True,
) -> bool:
    engine = SearchEngine(capacity=capacity, skip_first=skip_first)
    return engine.solve(n, target_cost, target_weight, costs, weights)


def engine_from_config(cfg: Dict[str, Any]) -> SearchEngine:
    """Build an engine from the `search` config section (missing keys use defaults)."""
    search_cfg = cfg.get("search") or {}
    cap_cfg = search_cfg.get("capacity") or {}
    defaults = Capacity()
    capacity = Capacity(
        max_x=int(cap_cfg.get("max_x", defaults.max_x)),
        max_y=int(cap_cfg.get("max_y", defaults.max_y)),
        max_z=int(cap_cfg.get("max_z", defaults.max_z)),
    )
    max_steps = search_cfg.get("max_steps")
    return SearchEngine(
        capacity=capacity,
        skip_first=bool(search_cfg.get("skip_first", True)),
        max_steps=int(max_steps) if max_steps is not None else None,
    )
