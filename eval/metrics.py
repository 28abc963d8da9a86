"""Run metrics computation."""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from config_io.schema import OptimizationResult


def compute_metrics(result: OptimizationResult | dict) -> dict[str, Any]:
    """Compute summary metrics from an optimization result (model or dict)."""
    if isinstance(result, dict):
        result = OptimizationResult(**result)

    best = np.asarray(result.best_position, dtype=float)
    personal_values = [t.best_value for t in result.turtles]
    finite_values = [v for v in personal_values if math.isfinite(v)]

    # Distance of each personal best from the global best
    if result.turtles:
        distances = [
            float(np.linalg.norm(np.asarray(t.best_position, dtype=float) - best))
            for t in result.turtles
        ]
        mean_spread = sum(distances) / len(distances)
        max_spread = max(distances)
    else:
        mean_spread = 0.0
        max_spread = 0.0

    mean_personal = sum(finite_values) / len(finite_values) if finite_values else math.inf

    return {
        "status": result.status.value,
        "iterations": result.iterations,
        "evaluations": result.iterations * result.population_size,
        "population_size": result.population_size,
        "best_value": result.best_value,
        "mean_personal_best": mean_personal,
        "mean_spread": mean_spread,
        "max_spread": max_spread,
    }
