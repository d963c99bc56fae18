from __future__ import annotations

from typing import Dict, List, Tuple
import numpy as np

from lattice.engine import SearchEngine
from lattice.errors import SearchInvariantError
from lattice.items import Item, Problem


def sample_problem(
    rng: np.random.Generator,
    n_items: int,
    max_price: int,
    max_calories: int,
    cost_limit: int,
    weight_limit: int,
    reachable: bool,
) -> Problem:
    """Draw a random instance whose targets fit inside the given limits.

    With `reachable`, the targets are the sums of a random subset (trimmed
    until it fits), so the answer is known to be Yes. Otherwise targets are
    uniform and the answer is whatever the search says.
    """

    prices = rng.integers(0, max_price + 1, size=n_items)
    calories = rng.integers(0, max_calories + 1, size=n_items)
    items = tuple(Item(price=int(p), calories=int(c)) for p, c in zip(prices.tolist(), calories.tolist()))

    if reachable:
        chosen = rng.random(n_items) < 0.5
        picked = [i for i in range(n_items) if chosen[i]]
        rng.shuffle(picked)
        cost = int(sum(prices[i] for i in picked))
        weight = int(sum(calories[i] for i in picked))
        while cost > cost_limit or weight > weight_limit:
            i = picked.pop()
            cost -= int(prices[i])
            weight -= int(calories[i])
    else:
        cost = int(rng.integers(0, cost_limit + 1))
        weight = int(rng.integers(0, weight_limit + 1))

    return Problem(n=n_items, target_cost=cost, target_weight=weight, items=items)


def _run_both_orders(base: SearchEngine, problem: Problem) -> Tuple[bool, int, int, int]:
    args = (problem.n, problem.target_cost, problem.target_weight, problem.costs, problem.weights)
    skip_first = SearchEngine(capacity=base.capacity, skip_first=True, max_steps=base.max_steps).run(*args)
    buy_first = SearchEngine(capacity=base.capacity, skip_first=False, max_steps=base.max_steps).run(*args)

    if skip_first.found != buy_first.found:
        raise SearchInvariantError(f"push order changed the answer for {problem}")

    return skip_first.found, skip_first.stats.pops, buy_first.stats.pops, skip_first.stats.peak_stack


def run_benchmark(
    engine: SearchEngine,
    rng: np.random.Generator,
    n_instances: int = 50,
    n_items: int = 20,
    max_price: int = 10,
    max_calories: int = 10,
    reachable_fraction: float = 0.5,
) -> Dict[str, object]:
    """Solve random instances under both push orders and summarise the work done."""

    cap = engine.capacity
    if n_items > cap.max_x - 1:
        raise ValueError(f"n_items={n_items} exceeds capacity max_x={cap.max_x}")

    yes = 0
    pops_skip: List[int] = []
    pops_buy: List[int] = []
    peaks: List[int] = []

    for _ in range(int(n_instances)):
        problem = sample_problem(
            rng,
            n_items=n_items,
            max_price=max_price,
            max_calories=max_calories,
            cost_limit=cap.max_y - 1,
            weight_limit=cap.max_z - 1,
            reachable=bool(rng.random() < reachable_fraction),
        )
        found, p_skip, p_buy, peak = _run_both_orders(engine, problem)
        yes += int(found)
        pops_skip.append(p_skip)
        pops_buy.append(p_buy)
        peaks.append(peak)

    return {
        "bench_instances": int(n_instances),
        "bench_yes_rate": yes / max(1, int(n_instances)),
        "bench_pops_mean_skip_first": float(np.mean(pops_skip)) if pops_skip else 0.0,
        "bench_pops_mean_buy_first": float(np.mean(pops_buy)) if pops_buy else 0.0,
        "bench_peak_stack_mean": float(np.mean(peaks)) if peaks else 0.0,
    }
