"""CLI command: print the report of a saved run."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config_io.schema import OptimizationResult
from config_io.utils import load_json
from eval.metrics import compute_metrics
from eval.report import format_report


def main() -> None:
    parser = argparse.ArgumentParser(description="Report on a saved turtle swarm run")
    parser.add_argument("--result", type=str, required=True, help="Path to result JSON")
    args = parser.parse_args()

    result = OptimizationResult(**load_json(args.result))
    metrics = compute_metrics(result)

    print(format_report(result))
    print(f"\n  Evaluations: {metrics['evaluations']}")
    print(f"  Mean spread of personal bests: {metrics['mean_spread']:.6g}")


if __name__ == "__main__":
    main()
