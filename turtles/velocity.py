"""The turtle velocity rule.

Turtles move slowly and methodically.  Each step a turtle's velocity changes
by two unweighted pulls, one toward its own best position and one toward the
swarm's best position.  Only the sign of each difference matters; the size of
each pull is always the velocity constant.
"""

from __future__ import annotations

import numpy as np

# Do not raise this.  A larger value loses every advantage of the turtle swarm.
TURTLE_VELOCITY: float = float(np.finfo(np.float64).eps)


def turtle_velocity(dtype: np.dtype | type = np.float64) -> float:
    """Default velocity constant for the given floating-point precision."""
    return float(np.finfo(dtype).eps)


def velocity_delta(
    position: np.ndarray,
    personal_best: np.ndarray,
    global_best: np.ndarray,
    velocity_constant: float,
) -> np.ndarray:
    """Velocity change for one turtle in one step.

    Unlike Kennedy and Eberhart there are no cognitive or social weights and
    no random factors: we aren't sure what motivates turtles, so neither pull
    is favoured.  A zero difference contributes nothing, so a turtle sitting
    on both bests keeps the velocity it already has.
    """
    personal = velocity_constant * np.sign(personal_best - position)
    social = velocity_constant * np.sign(global_best - position)
    return personal + social
