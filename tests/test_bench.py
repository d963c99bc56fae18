import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import numpy as np

import main_bench
from lattice.bench import run_benchmark, sample_problem
from lattice.engine import SearchEngine
from lattice.state import Capacity
from utils.logging import log_event


class BenchTest(unittest.TestCase):
    def test_reachable_samples_are_solvable(self) -> None:
        rng = np.random.default_rng(5)
        engine = SearchEngine(capacity=Capacity(max_x=21, max_y=31, max_z=31))
        for _ in range(20):
            problem = sample_problem(rng, 12, 9, 9, cost_limit=30, weight_limit=30, reachable=True)
            self.assertLessEqual(problem.target_cost, 30)
            self.assertLessEqual(problem.target_weight, 30)
            self.assertTrue(engine.solve_problem(problem))

    def test_metrics(self) -> None:
        engine = SearchEngine(capacity=Capacity(max_x=11, max_y=21, max_z=21))
        metrics = run_benchmark(
            engine,
            np.random.default_rng(0),
            n_instances=12,
            n_items=8,
            max_price=5,
            max_calories=5,
            reachable_fraction=1.0,
        )
        self.assertEqual(metrics["bench_instances"], 12)
        self.assertEqual(metrics["bench_yes_rate"], 1.0)
        self.assertGreater(metrics["bench_pops_mean_skip_first"], 0.0)
        self.assertGreater(metrics["bench_pops_mean_buy_first"], 0.0)
        self.assertGreater(metrics["bench_peak_stack_mean"], 0.0)

    def test_too_many_items(self) -> None:
        engine = SearchEngine(capacity=Capacity(max_x=5))
        with self.assertRaises(ValueError):
            run_benchmark(engine, np.random.default_rng(0), n_items=5)

    def test_main_writes_event(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            exp = Path(tmp) / "small.yaml"
            exp.write_text(
                "name: small\nbench:\n  n_instances: 4\n  n_items: 6\n  max_price: 4\n  max_calories: 4\n",
                encoding="utf-8",
            )
            with patch("builtins.print"):
                metrics = main_bench.main(["--exp", str(exp), "--out", tmp])

            log = Path(tmp) / "small" / "bench.jsonl"
            records = [json.loads(line) for line in log.read_text(encoding="utf-8").splitlines()]
            self.assertEqual(records[-1]["type"], "bench")
            self.assertEqual(records[-1]["exp"], "small")
            self.assertEqual(records[-1]["bench_instances"], metrics["bench_instances"])
            with self.assertRaises(RuntimeError):
                log_event("bench", {})


if __name__ == "__main__":
    unittest.main()
