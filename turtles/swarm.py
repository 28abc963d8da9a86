"""The turtle swarm optimizer.

A swarm owns a population of turtles plus the best position and value seen
by any of them.  One difference from the usual particle swarm optimizers:
there is no early exit.  ``run`` keeps the turtles working until the caller's
convergence predicate is satisfied, with no iteration cap and no timeout.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np
from numpy.random import Generator

from config_io.config import SwarmConfig
from config_io.schema import OptimizationResult, SwarmStatus, TurtleSummary
from turtles.boundary import Boundary, BoundsLike
from turtles.convergence import ConvergencePredicate
from turtles.errors import ConfigurationError, ObjectiveEvaluationError, SwarmStateError
from turtles.objectives import Objective
from turtles.turtle import Turtle
from turtles.velocity import turtle_velocity, velocity_delta


def _checked_velocity(velocity_constant: object, dtype: np.dtype) -> float:
    """The velocity constant as a finite positive value of ``dtype``."""
    try:
        as_dtype = dtype.type(velocity_constant)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"invalid velocity_constant {velocity_constant!r}") from exc
    if not (np.isfinite(as_dtype) and as_dtype > 0):
        raise ConfigurationError(
            f"velocity_constant must be a finite positive number representable "
            f"as {dtype}, got {velocity_constant!r}"
        )
    return float(as_dtype)


class Swarm:
    """A population of turtles searching a bounded, real-valued space.

    Build one with :meth:`initialize` (or :meth:`from_config`), then either
    call :meth:`step` yourself or hand over to :meth:`run`.
    """

    def __init__(
        self,
        turtles: Sequence[Turtle],
        boundary: Boundary,
        velocity_constant: float,
        clamp_positions: bool = False,
    ):
        if not turtles:
            raise ConfigurationError("a swarm needs at least one turtle")
        for index, turtle in enumerate(turtles):
            shapes = {turtle.position.shape, turtle.velocity.shape, turtle.best_position.shape}
            if shapes != {(boundary.dimensions,)}:
                raise ConfigurationError(
                    f"turtle {index} has shapes {sorted(shapes)}, "
                    f"expected ({boundary.dimensions},) to match the bounds"
                )
        self._turtles = list(turtles)
        self._boundary = boundary
        self._velocity_constant = _checked_velocity(velocity_constant, self._turtles[0].position.dtype)
        self._clamp_positions = clamp_positions

        self._iterations = 0
        self._status = SwarmStatus.RUNNING
        # Nothing has been evaluated yet; the first finite score replaces this
        self._best_position = self._turtles[0].position.copy()
        self._best_value = math.inf

    # ── Construction ─────────────────────────────────────────────────

    @classmethod
    def initialize(
        cls,
        dimensions: int,
        bounds: BoundsLike,
        population_size: int,
        velocity_constant: Optional[float] = None,
        *,
        seed: Optional[int] = None,
        rng: Optional[Generator] = None,
        dtype: np.dtype | type | str = np.float64,
        clamp_positions: bool = False,
    ) -> Swarm:
        """Create ``population_size`` turtles spread uniformly within bounds.

        Args:
            dimensions: Dimensionality of the search space.
            bounds: One (lower, upper) pair for every dimension, or a list of
                pairs, or a :class:`Boundary`.
            population_size: Number of turtles.
            velocity_constant: Fixed per-step pull magnitude.  Defaults to the
                machine epsilon of ``dtype``.
            seed: Seed for a fresh ``numpy.random.default_rng``.  Ignored when
                ``rng`` is given.
            dtype: Floating-point precision of positions and velocities.
            clamp_positions: Clip positions back into bounds after moving.

        Raises:
            ConfigurationError: on invalid dimensions, bounds, population size
                or velocity constant.  No swarm is created.
        """
        if dimensions < 1:
            raise ConfigurationError(f"dimensions must be >= 1, got {dimensions}")
        if population_size < 1:
            raise ConfigurationError(f"population_size must be >= 1, got {population_size}")
        boundary = Boundary.parse(dimensions, bounds)

        try:
            dtype = np.dtype(dtype)
        except TypeError as exc:
            raise ConfigurationError(f"unsupported precision {dtype!r}") from exc
        if dtype.kind != "f":
            raise ConfigurationError(f"precision must be a floating-point type, got {dtype}")

        if velocity_constant is None:
            velocity_constant = turtle_velocity(dtype)
        velocity_constant = _checked_velocity(velocity_constant, dtype)

        lower, upper = boundary.representable(dtype)
        empty = np.flatnonzero(lower > upper)
        if empty.size:
            d = int(empty[0])
            raise ConfigurationError(
                f"no {dtype} value lies within the bounds of dimension {d}: "
                f"[{boundary.lower[d]}, {boundary.upper[d]}]"
            )

        if rng is None:
            rng = np.random.default_rng(seed)
        turtles = [
            Turtle.spawn(boundary, velocity_constant, rng, dtype)
            for _ in range(population_size)
        ]
        return cls(turtles, boundary, velocity_constant, clamp_positions=clamp_positions)

    @classmethod
    def from_config(cls, config: SwarmConfig) -> Swarm:
        return cls.initialize(
            config.dimensions,
            config.resolved_bounds(),
            config.population_size,
            config.velocity_constant,
            seed=config.seed,
            dtype=config.precision,
            clamp_positions=config.clamp_positions,
        )

    # ── State ────────────────────────────────────────────────────────

    @property
    def turtles(self) -> list[Turtle]:
        return self._turtles

    @property
    def boundary(self) -> Boundary:
        return self._boundary

    @property
    def dimensions(self) -> int:
        return self._boundary.dimensions

    @property
    def population_size(self) -> int:
        return len(self._turtles)

    @property
    def velocity_constant(self) -> float:
        return self._velocity_constant

    @property
    def iterations(self) -> int:
        return self._iterations

    @property
    def best_position(self) -> np.ndarray:
        return self._best_position.copy()

    @property
    def best_value(self) -> float:
        return self._best_value

    @property
    def status(self) -> SwarmStatus:
        return self._status

    @property
    def is_converged(self) -> bool:
        return self._status is SwarmStatus.CONVERGED

    # ── Algorithm ────────────────────────────────────────────────────

    def _evaluate(self, objective: Objective) -> None:
        for index, turtle in enumerate(self._turtles):
            try:
                value = float(objective(turtle.position.copy()))
            except Exception as exc:
                raise ObjectiveEvaluationError(
                    f"objective failed for turtle {index} at {turtle.position.tolist()}: {exc}"
                ) from exc
            if math.isnan(value):
                raise ObjectiveEvaluationError(
                    f"objective returned NaN for turtle {index} at {turtle.position.tolist()}"
                )

            if value < turtle.best_value:
                turtle.best_value = value
                turtle.best_position = turtle.position.copy()
                if value < self._best_value:
                    self._best_value = value
                    self._best_position = turtle.position.copy()

    def _update_velocities(self) -> None:
        global_best = self._best_position.copy()
        for turtle in self._turtles:
            turtle.velocity = turtle.velocity + velocity_delta(
                turtle.position,
                turtle.best_position,
                global_best,
                self._velocity_constant,
            )

    def _update_positions(self) -> None:
        for turtle in self._turtles:
            turtle.position = turtle.position + turtle.velocity
            if self._clamp_positions:
                turtle.position = self._boundary.clip(turtle.position)

    def step(self, objective: Objective) -> None:
        """Evaluate every turtle, then move each one by its updated velocity.

        Raises:
            ObjectiveEvaluationError: if the objective raises or returns NaN.
                Turtles evaluated before the failure keep their new bests.
            SwarmStateError: if the swarm has already converged.
        """
        if self.is_converged:
            raise SwarmStateError(
                f"swarm converged after {self._iterations} iterations; it cannot step again"
            )
        self._evaluate(objective)
        self._update_velocities()
        self._update_positions()
        self._iterations += 1

    def run(
        self, objective: Objective, converged: ConvergencePredicate,
    ) -> tuple[np.ndarray, float]:
        """Step until ``converged(self)`` is true; return the best position and value.

        The predicate is the only way out.  It is checked once after every
        completed step, so at least one step always runs.  A swarm that has
        already converged returns its stored result without stepping.
        """
        if self.is_converged:
            return self.best_position, self._best_value
        while True:
            self.step(objective)
            if converged(self):
                self._status = SwarmStatus.CONVERGED
                return self.best_position, self._best_value

    # ── Reporting ────────────────────────────────────────────────────

    def summary(self) -> OptimizationResult:
        return OptimizationResult(
            status=self._status,
            iterations=self._iterations,
            population_size=self.population_size,
            dimensions=self.dimensions,
            velocity_constant=self._velocity_constant,
            best_position=self._best_position.tolist(),
            best_value=self._best_value,
            turtles=[
                TurtleSummary(
                    best_position=t.best_position.tolist(),
                    best_value=t.best_value,
                )
                for t in self._turtles
            ],
        )
