"""Tests for domain/model/graph.py."""

from types import MappingProxyType

import pytest

from cleanarch.domain.exceptions import GraphConsistencyError
from cleanarch.domain.model.graph import DependencyGraph
from tests.factories import make_graph, make_unit


class TestFromUnits:
    """Tests for DependencyGraph.from_units."""

    def test_indexes_by_name(self) -> None:
        graph = make_graph(make_unit("a.A"), make_unit("a.B"))

        assert graph.get("a.A") is graph.units[0]
        assert graph.has_unit("a.B")
        assert graph.get("a.Missing") is None

    def test_duplicate_name_raises(self) -> None:
        with pytest.raises(GraphConsistencyError, match="duplicate unit name"):
            make_graph(make_unit("a.A"), make_unit("a.A"))

    def test_indexes_are_read_only(self) -> None:
        graph = make_graph(make_unit("a.A", "a.B"))
        assert isinstance(graph.by_name, MappingProxyType)
        assert isinstance(graph.inbound, MappingProxyType)

    def test_empty(self) -> None:
        graph = DependencyGraph.empty()
        assert graph.unit_count == 0
        assert graph.edge_count == 0
        assert list(graph.edges()) == []


class TestEdges:
    """Tests for edge queries."""

    def test_outbound(self) -> None:
        graph = make_graph(make_unit("a.A", "a.B", "java.util.List"))

        assert [e.target for e in graph.outbound("a.A")] == ["a.B", "java.util.List"]
        assert graph.outbound("a.Unknown") == ()

    def test_dependents_of(self) -> None:
        graph = make_graph(
            make_unit("a.A", "a.C"),
            make_unit("a.B", "a.C"),
            make_unit("a.C"),
        )

        assert [e.origin for e in graph.dependents_of("a.C")] == ["a.A", "a.B"]
        assert graph.dependents_of("a.A") == ()

    def test_dependents_of_unknown_target(self) -> None:
        """Targets outside the graph are indexed too."""
        graph = make_graph(make_unit("a.A", "lib.X"))
        assert [e.origin for e in graph.dependents_of("lib.X")] == ["a.A"]

    def test_edges_in_unit_order(self) -> None:
        graph = make_graph(make_unit("a.B", "x.1", "x.2"), make_unit("a.A", "x.3"))
        assert [e.target for e in graph.edges()] == ["x.1", "x.2", "x.3"]

    def test_counts(self) -> None:
        graph = make_graph(make_unit("a.A", "a.B", "a.C"), make_unit("a.B", "a.C"))
        assert graph.unit_count == 2
        assert graph.edge_count == 3


class TestRestrictedTo:
    """Tests for DependencyGraph.restricted_to."""

    def test_keeps_accepted_units(self) -> None:
        graph = make_graph(make_unit("a.A", "b.B"), make_unit("b.B"))

        restricted = graph.restricted_to(lambda u: u.name.startswith("a."))

        assert [u.name for u in restricted.units] == ["a.A"]
        # Edge to the dropped unit survives
        assert restricted.edge_count == 1
        assert not restricted.has_unit("b.B")
