"""Optimization runner: run a single swarm or a batch across seeds."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Any

from config_io.config import Config
from config_io.schema import OptimizationResult
from config_io.utils import save_json, ensure_dir
from eval.metrics import compute_metrics
from turtles.convergence import goal_reached
from turtles.objectives import Objective, get_objective
from turtles.swarm import Swarm

logger = logging.getLogger(__name__)


def save_result(result: OptimizationResult, path: str | Path) -> None:
    save_json(result.model_dump(), path)


def run_optimization(
    config: Config,
    objective: Objective | None = None,
    result_path: str | None = None,
) -> OptimizationResult:
    """Run one swarm until the configured goal is reached.

    Args:
        objective: Callable to minimise.  Defaults to the named objective in
            ``config.run.objective``.
        result_path: If set, save the result as JSON to this path.

    There is no iteration cap: this call returns only once the best value is
    at or below ``config.run.goal``.
    """
    scfg = config.swarm
    if objective is None:
        objective_name = config.run.objective
        objective = get_objective(objective_name)
    else:
        objective_name = getattr(objective, "__name__", repr(objective))

    swarm = Swarm.from_config(scfg)

    if scfg.velocity_constant is not None:
        logger.warning(f"velocity_constant overridden to {swarm.velocity_constant:g}; "
                       f"turtles are meant to move at machine epsilon")

    logger.info(f"Running swarm: turtles={swarm.population_size}, dims={swarm.dimensions}, "
                f"objective={objective_name}, goal={config.run.goal}, seed={scfg.seed}")

    swarm.run(objective, goal_reached(config.run.goal))
    result = swarm.summary()

    logger.info(f"Converged after {result.iterations} iterations, best={result.best_value:g}")

    if result_path:
        save_result(result, result_path)
        logger.info(f"Result saved to {result_path}")

    return result


def run_evaluation(
    config: Config,
    seeds: list[int],
    output_dir: str = "runs",
) -> dict[str, Any]:
    """Run one swarm per seed and produce metrics CSV + summary."""
    out = ensure_dir(output_dir)
    all_metrics: list[dict] = []

    for seed in seeds:
        logger.info(f"Running seed {seed}...")
        seeded = config.model_copy(deep=True)
        seeded.swarm.seed = seed
        result_path = str(out / f"eval_seed{seed}.json")
        result = run_optimization(seeded, result_path=result_path)
        metrics = compute_metrics(result)
        metrics["seed"] = seed
        all_metrics.append(metrics)
        logger.info(f"  Seed {seed}: {metrics['iterations']} iterations, "
                    f"best: {metrics['best_value']:g}")

    # Write CSV
    csv_path = str(out / "evaluation_metrics.csv")
    if all_metrics:
        fieldnames = list(all_metrics[0].keys())
        with open(csv_path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(all_metrics)
        logger.info(f"CSV written to {csv_path}")

    # Aggregate summary
    if all_metrics:
        avg_iterations = sum(m["iterations"] for m in all_metrics) / len(all_metrics)
        best_value = min(m["best_value"] for m in all_metrics)
    else:
        avg_iterations = 0
        best_value = None

    summary = {
        "objective": config.run.objective,
        "goal": config.run.goal,
        "num_seeds": len(seeds),
        "avg_iterations": round(avg_iterations, 1),
        "best_value": best_value,
        "all_metrics": all_metrics,
    }
    summary_path = str(out / "evaluation_summary.json")
    save_json(summary, summary_path)
    logger.info(f"Summary written to {summary_path}")

    return summary
