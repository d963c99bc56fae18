from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from lattice.bench import run_benchmark
from lattice.engine import engine_from_config
from utils.config import load_config, load_yaml
from utils.logging import JsonlLogger, ensure_dir, log_event
from utils.rng import set_global_seed

DEFAULT_CONFIG = Path(__file__).resolve().parent / "config.yaml"


def main(argv: Optional[List[str]] = None) -> dict:
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", default=str(DEFAULT_CONFIG), help="Base config")
    ap.add_argument("--exp", default="", help="Path to experiments/*.yaml")
    ap.add_argument("--out", default="logs", help="Log output dir")
    args = ap.parse_args(argv)

    cfg = load_config(args.config, args.exp or None)
    exp_name = "default"
    if args.exp:
        exp_name = load_yaml(args.exp).get("name", Path(args.exp).stem)

    out_dir = Path(args.out) / exp_name
    ensure_dir(out_dir)

    bench_cfg = cfg.get("bench") or {}
    rng = set_global_seed(int(bench_cfg.get("seed", 7)))
    engine = engine_from_config(cfg)

    print(f"[BENCH] {exp_name}: skip_first={engine.skip_first} capacity={engine.capacity}")

    metrics = run_benchmark(
        engine,
        rng,
        n_instances=int(bench_cfg.get("n_instances", 50)),
        n_items=int(bench_cfg.get("n_items", 20)),
        max_price=int(bench_cfg.get("max_price", 10)),
        max_calories=int(bench_cfg.get("max_calories", 10)),
        reachable_fraction=float(bench_cfg.get("reachable_fraction", 0.5)),
    )

    with JsonlLogger(out_dir / "bench.jsonl"):
        log_event("bench", {"exp": exp_name, **metrics})

    print(metrics)
    return metrics


if __name__ == "__main__":
    main()
