"""Benchmark objective functions.

All objectives map a position vector to a real score and are minimised.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

Objective = Callable[[np.ndarray], float]


def sphere(x: np.ndarray) -> float:
    """Sum of squares; minimum 0 at the origin."""
    return float(np.sum(x * x))


def identity(x: np.ndarray) -> float:
    """Sum of coordinates; pulls turtles toward the lower bound."""
    return float(np.sum(x))


def rastrigin(x: np.ndarray) -> float:
    """Highly multimodal; minimum 0 at the origin."""
    return float(10.0 * x.size + np.sum(x * x - 10.0 * np.cos(2.0 * np.pi * x)))


def rosenbrock(x: np.ndarray) -> float:
    """Curved valley; minimum 0 at (1, ..., 1).  One dimension reduces to 0."""
    return float(np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (1.0 - x[:-1]) ** 2))


OBJECTIVES: dict[str, Objective] = {
    "sphere": sphere,
    "identity": identity,
    "rastrigin": rastrigin,
    "rosenbrock": rosenbrock,
}


def get_objective(name: str) -> Objective:
    try:
        return OBJECTIVES[name]
    except KeyError:
        raise ValueError(
            f"Unknown objective: {name} (choose from {', '.join(sorted(OBJECTIVES))})"
        ) from None
