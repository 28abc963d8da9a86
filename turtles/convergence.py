"""Convergence predicates: the only way a swarm is allowed to stop."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from turtles.swarm import Swarm

ConvergencePredicate = Callable[["Swarm"], bool]


def goal_reached(goal: float) -> ConvergencePredicate:
    """True once the swarm's best value is at or below ``goal``."""

    def predicate(swarm: Swarm) -> bool:
        return swarm.best_value <= goal

    predicate.__name__ = f"goal_reached({goal!r})"
    return predicate


def all_of(*predicates: ConvergencePredicate) -> ConvergencePredicate:
    if not predicates:
        raise ValueError("all_of needs at least one predicate")

    def predicate(swarm: Swarm) -> bool:
        return all(p(swarm) for p in predicates)

    return predicate


def any_of(*predicates: ConvergencePredicate) -> ConvergencePredicate:
    """True once any predicate holds."""
    if not predicates:
        raise ValueError("any_of needs at least one predicate")

    def predicate(swarm: Swarm) -> bool:
        return any(p(swarm) for p in predicates)

    return predicate
