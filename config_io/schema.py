"""Pydantic models for optimization results."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


# ── Enums ──────────────────────────────────────────────────────────────────

class SwarmStatus(str, enum.Enum):
    RUNNING = "RUNNING"
    CONVERGED = "CONVERGED"


# ── Result schema ─────────────────────────────────────────────────────────

class TurtleSummary(BaseModel):
    best_position: list[float]
    best_value: float


class OptimizationResult(BaseModel):
    """Everything worth keeping once a swarm has been discarded."""
    status: SwarmStatus
    iterations: int = Field(ge=0)
    population_size: int = Field(ge=1)
    dimensions: int = Field(ge=1)
    velocity_constant: float = Field(gt=0.0)
    best_position: list[float]
    best_value: float
    turtles: list[TurtleSummary] = Field(default_factory=list)
