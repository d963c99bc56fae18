from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from lattice.engine import engine_from_config
from lattice.errors import InputValidationError, SearchBudgetExceeded
from lattice.reader import parse_problem
from utils.config import load_config
from utils.logging import JsonlLogger, log_event

DEFAULT_CONFIG = Path(__file__).resolve().parent / "config.yaml"


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Read 'n c e' and n item pairs; print Yes or No.")
    ap.add_argument("--config", default=str(DEFAULT_CONFIG), help="Base config")
    ap.add_argument("--exp", default="", help="Optional YAML patch merged over the base config")
    ap.add_argument("--input", default="", help="Read the problem from a file instead of stdin")
    ap.add_argument("--log", default="", help="Append a JSONL solve event here")
    ap.add_argument("--buy-first", action="store_true", help="Explore buy before skip")
    args = ap.parse_args(argv)

    cfg = load_config(args.config, args.exp or None)
    if args.buy_first:
        cfg.setdefault("search", {})["skip_first"] = False
    engine = engine_from_config(cfg)

    try:
        if args.input:
            text = Path(args.input).read_text(encoding="utf-8")
        else:
            text = sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read input: {e}", file=sys.stderr)
        return 2

    try:
        problem = parse_problem(text)
        result = engine.run(
            problem.n,
            problem.target_cost,
            problem.target_weight,
            problem.costs,
            problem.weights,
        )
    except InputValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except SearchBudgetExceeded as e:
        print(f"error: {e}", file=sys.stderr)
        return 3

    sys.stdout.write("Yes\n" if result.found else "No\n")
    sys.stdout.flush()

    if args.log:
        with JsonlLogger(Path(args.log)):
            log_event(
                "solve",
                {
                    "n": problem.n,
                    "target_cost": problem.target_cost,
                    "target_weight": problem.target_weight,
                    "skip_first": engine.skip_first,
                    "found": result.found,
                    **result.stats.to_dict(),
                },
            )

    return 0


if __name__ == "__main__":
    sys.exit(main())
