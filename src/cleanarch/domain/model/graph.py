"""Immutable dependency graph snapshot with O(1) name and inbound lookups."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from cleanarch.domain.exceptions.graph import GraphConsistencyError
from cleanarch.domain.model.unit import Edge, Unit


@dataclass(frozen=True, slots=True)
class DependencyGraph:
    """Units of a codebase and the directed edges between them.

    Use from_units() for construction: it validates the snapshot and
    builds the name and inbound-edge indexes once.

    Invariants (FAIL-FIRST):
    - unit names are unique
    - by_name[u.name] is u for every unit
    - inbound[t] holds exactly the edges whose target is t, in unit order

    Attributes:
        units: All units in declaration order
        by_name: Name -> Unit index
        inbound: Target name -> edges pointing at it
    """

    units: tuple[Unit, ...]
    by_name: Mapping[str, Unit]
    inbound: Mapping[str, tuple[Edge, ...]]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self.by_name) != len(self.units):
            raise GraphConsistencyError("unit index does not match unit list")
        for unit in self.units:
            if self.by_name.get(unit.name) is not unit:
                raise GraphConsistencyError("unit missing from index", unit.name)

    @classmethod
    def from_units(cls, units: Iterable[Unit]) -> DependencyGraph:
        """Build graph from units.

        Args:
            units: Units with their outbound edges

        Returns:
            Immutable DependencyGraph

        Raises:
            GraphConsistencyError: If two units share a name

        Time: O(U + E)
        """
        ordered = tuple(units)
        by_name: dict[str, Unit] = {}
        inbound: dict[str, list[Edge]] = {}

        for unit in ordered:
            if unit.name in by_name:
                raise GraphConsistencyError("duplicate unit name", unit.name)
            by_name[unit.name] = unit
            for edge in unit.edges:
                inbound.setdefault(edge.target, []).append(edge)

        return cls(
            units=ordered,
            by_name=MappingProxyType(by_name),
            inbound=MappingProxyType({k: tuple(v) for k, v in inbound.items()}),
        )

    @classmethod
    def empty(cls) -> DependencyGraph:
        """Create empty graph."""
        return cls.from_units(())

    def get(self, name: str) -> Unit | None:
        """Get unit by name. Returns None for units outside the graph."""
        return self.by_name.get(name)

    def has_unit(self, name: str) -> bool:
        """Check if unit is in graph. O(1)."""
        return name in self.by_name

    def outbound(self, name: str) -> tuple[Edge, ...]:
        """Edges leaving the unit (empty for unknown units)."""
        unit = self.by_name.get(name)
        return unit.edges if unit is not None else ()

    def dependents_of(self, name: str) -> tuple[Edge, ...]:
        """Edges pointing at the unit (dependencies to self). O(1)."""
        return self.inbound.get(name, ())

    def edges(self) -> Iterator[Edge]:
        """Iterate all edges, grouped by origin in unit order."""
        for unit in self.units:
            yield from unit.edges

    def restricted_to(self, predicate: Callable[[Unit], bool]) -> DependencyGraph:
        """Sub-snapshot keeping only units accepted by predicate.

        Outbound edges of kept units are kept as-is, so their targets may
        now be absent from the graph.
        """
        return DependencyGraph.from_units(u for u in self.units if predicate(u))

    @property
    def unit_count(self) -> int:
        """Number of units."""
        return len(self.units)

    @property
    def edge_count(self) -> int:
        """Total number of edges."""
        return sum(len(u.edges) for u in self.units)
