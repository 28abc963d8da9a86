"""A single turtle: one candidate solution in the swarm."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.random import Generator

from turtles.boundary import Boundary


@dataclass(eq=False)
class Turtle:
    """Position, velocity and personal-best record of one turtle.

    Turtles play the part of particles in particle swarm optimization.  They
    are owned by a swarm and mutated in place every step.
    """

    position: np.ndarray
    velocity: np.ndarray
    best_position: np.ndarray
    best_value: float = float("inf")

    @classmethod
    def spawn(
        cls,
        boundary: Boundary,
        velocity_constant: float,
        rng: Generator,
        dtype: np.dtype | type = np.float64,
    ) -> Turtle:
        """Place a turtle uniformly inside the boundary.

        Every velocity component starts at +/- velocity_constant with a random
        sign.  The personal best starts at the spawn position with an infinite
        value, so the first evaluation always replaces it.
        """
        position = boundary.clip(rng.uniform(boundary.lower, boundary.upper).astype(dtype))
        signs = rng.choice(np.array([-1.0, 1.0]), size=boundary.dimensions)
        velocity = (signs * velocity_constant).astype(dtype)
        return cls(
            position=position,
            velocity=velocity,
            best_position=position.copy(),
        )

    @property
    def dimensions(self) -> int:
        return int(self.position.size)
