"""Unit predicates."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cleanarch.domain.patterns import PackagePattern, compile_pattern
from cleanarch.domain.predicates.base import UnitPredicate

if TYPE_CHECKING:
    from cleanarch.domain.model.enums import ConstructorVisibility, UnitKind
    from cleanarch.domain.model.unit import Unit


def _compile(patterns: tuple[PackagePattern | str, ...]) -> tuple[PackagePattern, ...]:
    return tuple(p if isinstance(p, PackagePattern) else compile_pattern(p) for p in patterns)


def resides_in_package(*patterns: PackagePattern | str) -> UnitPredicate:
    """Create predicate: unit package matches any pattern.

    Args:
        patterns: Package patterns (empty = never matches)

    Returns:
        Predicate function

    Raises:
        PatternError: If a pattern is invalid
    """
    compiled = _compile(patterns)

    def predicate(unit: Unit) -> bool:
        return any(p.match(unit.package) for p in compiled)

    return predicate


def resides_outside_package(*patterns: PackagePattern | str) -> UnitPredicate:
    """Create predicate: unit package matches none of the patterns.

    Args:
        patterns: Package patterns

    Returns:
        Predicate function
    """
    compiled = _compile(patterns)

    def predicate(unit: Unit) -> bool:
        return not any(p.match(unit.package) for p in compiled)

    return predicate


def is_kind(kind: UnitKind) -> UnitPredicate:
    """Create predicate: unit is of kind.

    Args:
        kind: Required unit kind

    Returns:
        Predicate function
    """

    def predicate(unit: Unit) -> bool:
        return unit.kind == kind

    return predicate


def has_simple_name_ending_with(suffix: str) -> UnitPredicate:
    """Create predicate: unit simple name ends with suffix."""
    if not suffix:
        raise ValueError("suffix must not be empty")

    def predicate(unit: Unit) -> bool:
        return unit.simple_name.endswith(suffix)

    return predicate


def has_constructor_visibility(visibility: ConstructorVisibility) -> UnitPredicate:
    """Create predicate: unit constructors have visibility."""

    def predicate(unit: Unit) -> bool:
        return unit.constructor_visibility == visibility

    return predicate
