"""Predicate type alias and combinators."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cleanarch.domain.model.graph import DependencyGraph
    from cleanarch.domain.model.unit import Unit

# Type alias for predicate functions
UnitPredicate = Callable[["Unit"], bool]


def all_of(*predicates: UnitPredicate) -> UnitPredicate:
    """Create predicate: every predicate holds (logical AND).

    all_of() with no arguments accepts every unit.
    """

    def predicate(unit: Unit) -> bool:
        return all(p(unit) for p in predicates)

    return predicate


def any_of(*predicates: UnitPredicate) -> UnitPredicate:
    """Create predicate: at least one predicate holds (logical OR).

    any_of() with no arguments rejects every unit.
    """

    def predicate(unit: Unit) -> bool:
        return any(p(unit) for p in predicates)

    return predicate


def negate(inner: UnitPredicate) -> UnitPredicate:
    """Create predicate: inner predicate does not hold."""

    def predicate(unit: Unit) -> bool:
        return not inner(unit)

    return predicate


def select(graph: DependencyGraph, predicate: UnitPredicate) -> tuple[Unit, ...]:
    """Units of graph accepted by predicate, in graph order.

    Args:
        graph: Graph snapshot
        predicate: Selection predicate

    Returns:
        Selected units
    """
    return tuple(u for u in graph.units if predicate(u))
