"""Configuration loading and defaults."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, Field


# ── Sub-configs ────────────────────────────────────────────────────────────

class SwarmConfig(BaseModel):
    """Shape of the search space and of the swarm searching it.

    Only types are checked here; semantic problems such as inverted bounds
    are reported as ConfigurationError when the swarm is built.
    """
    dimensions: int = 1
    lower: float = -1.0
    upper: float = 1.0
    # Per-dimension (lower, upper) pairs; overrides lower/upper when set
    bounds: Optional[list[tuple[float, float]]] = None
    population_size: int = 33
    # None means machine epsilon for the chosen precision.  Change only after
    # discussion: a larger value gives up everything that makes turtles turtles.
    velocity_constant: Optional[float] = None
    precision: Literal["float64", "float32"] = "float64"
    clamp_positions: bool = False
    seed: int = 42

    def resolved_bounds(self) -> Any:
        if self.bounds is not None:
            return self.bounds
        return (self.lower, self.upper)


class RunConfig(BaseModel):
    objective: str = "sphere"
    goal: float = 1e-2


# ── Top-level config ───────────────────────────────────────────────────

class Config(BaseModel):
    swarm: SwarmConfig = Field(default_factory=SwarmConfig)
    run: RunConfig = Field(default_factory=RunConfig)


def load_config(path: str | Path | None = None, overrides: dict[str, Any] | None = None) -> Config:
    """Load config from YAML file, applying optional overrides."""
    data: dict[str, Any] = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p) as f:
                data = yaml.safe_load(f) or {}
    if overrides:
        _deep_merge(data, overrides)
    return Config(**data)


def _deep_merge(base: dict, overlay: dict) -> None:
    for k, v in overlay.items():
        if k in base and isinstance(base[k], dict) and isinstance(v, dict):
            _deep_merge(base[k], v)
        else:
            base[k] = v
