"""CLI command: run a single turtle swarm to its goal."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config_io.config import load_config
from eval.metrics import compute_metrics
from eval.report import format_report
from eval.runner import run_optimization
from turtles.objectives import OBJECTIVES


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the turtle swarm optimizer")
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config file")
    parser.add_argument("--objective", type=str, default=None, choices=sorted(OBJECTIVES))
    parser.add_argument("--goal", type=float, default=None, help="Stop once best <= goal")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--output", type=str, default=None, help="Result JSON path")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    overrides: dict = {}
    if args.objective is not None:
        overrides.setdefault("run", {})["objective"] = args.objective
    if args.goal is not None:
        overrides.setdefault("run", {})["goal"] = args.goal
    if args.seed is not None:
        overrides["swarm"] = {"seed": args.seed}

    config = load_config(args.config, overrides)

    result_path = args.output
    if result_path is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        result_path = f"runs/{timestamp}_seed{config.swarm.seed}.json"

    logging.info("Turtles do not hurry. There is no iteration limit; "
                 "this returns when the goal is reached.")

    result = run_optimization(config, result_path=result_path)
    metrics = compute_metrics(result)

    print("\n=== Optimization Summary ===")
    print(format_report(result))
    print(f"  Evaluations: {metrics['evaluations']}")
    print(f"  Mean personal best: {metrics['mean_personal_best']:g}")
    print(f"  Result saved: {result_path}")


if __name__ == "__main__":
    main()
