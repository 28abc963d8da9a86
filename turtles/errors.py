"""Exceptions raised by the turtle swarm optimizer."""

from __future__ import annotations


class TSOError(Exception):
    """Base class for all optimizer errors."""


class ConfigurationError(TSOError, ValueError):
    """Invalid dimensions, bounds, population size or velocity constant."""


class ObjectiveEvaluationError(TSOError):
    """The objective function failed while a step was in progress."""


class SwarmStateError(TSOError, RuntimeError):
    """A converged swarm was asked to keep stepping."""
