"""Tests for infrastructure/graph_loader.py."""

import json
from pathlib import Path

import pytest

from cleanarch.domain.exceptions import GraphConsistencyError
from cleanarch.domain.model.enums import ConstructorVisibility, UnitKind
from cleanarch.domain.model.location import SourceLocation
from cleanarch.domain.model.package_path import PackagePath
from cleanarch.infrastructure.graph_loader import graph_from_dict, load_graph

DOCUMENT = {
    "units": [
        {
            "name": "shop.core.Order",
            "kind": "class",
            "constructor_visibility": "private",
            "location": {"file": "Order.java", "line": 3},
            "edges": [
                {"target": "java.util.List", "location": {"file": "Order.java", "line": 9}},
                {
                    "target": "str",
                    "target_package": "",
                    "location": {"file": "Order.java"},
                    "builtin": True,
                },
            ],
        },
        {"name": "shop.usecase.port.Gateway", "package": "shop.usecase.port", "kind": "INTERFACE"},
        {"name": "shop.usecase.order.request.OrderRequest", "kind": "record"},
    ]
}


class TestGraphFromDict:
    """Tests for graph_from_dict."""

    def test_units_and_defaults(self) -> None:
        graph = graph_from_dict(DOCUMENT)

        order = graph.get("shop.core.Order")
        assert order is not None
        assert order.package == PackagePath.parse("shop.core")
        assert order.constructor_visibility == ConstructorVisibility.PRIVATE
        assert order.location == SourceLocation("Order.java", 3)
        assert graph.get("shop.usecase.port.Gateway").kind == UnitKind.INTERFACE
        request = graph.get("shop.usecase.order.request.OrderRequest")
        assert request.kind == UnitKind.RECORD_LIKE
        assert request.constructor_visibility == ConstructorVisibility.PUBLIC

    def test_edges(self) -> None:
        graph = graph_from_dict(DOCUMENT)

        first, second = graph.outbound("shop.core.Order")
        assert first.target_package == PackagePath.parse("java.util")
        assert first.location == SourceLocation("Order.java", 9)
        assert not first.is_builtin
        assert second.target_package.is_root
        assert second.is_builtin

    def test_not_a_document_raises(self) -> None:
        with pytest.raises(GraphConsistencyError, match="'units' list"):
            graph_from_dict([])

    def test_unknown_kind_raises(self) -> None:
        with pytest.raises(GraphConsistencyError, match="kind must be one of") as exc_info:
            graph_from_dict({"units": [{"name": "a.A", "kind": "enum"}]})
        assert exc_info.value.unit_name == "a.A"

    def test_edge_without_location_raises(self) -> None:
        document = {"units": [{"name": "a.A", "edges": [{"target": "b.B"}]}]}
        with pytest.raises(GraphConsistencyError, match="has no location"):
            graph_from_dict(document)

    def test_edge_without_target_raises(self) -> None:
        document = {"units": [{"name": "a.A", "edges": [{"location": {"file": "A.java"}}]}]}
        with pytest.raises(GraphConsistencyError):
            graph_from_dict(document)

    def test_name_outside_package_raises(self) -> None:
        with pytest.raises(GraphConsistencyError, match="must start with package"):
            graph_from_dict({"units": [{"name": "a.A", "package": "b"}]})

    def test_duplicate_unit_raises(self) -> None:
        with pytest.raises(GraphConsistencyError, match="duplicate"):
            graph_from_dict({"units": [{"name": "a.A"}, {"name": "a.A"}]})


class TestLoadGraph:
    """Tests for load_graph."""

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "graph.json"
        path.write_text(json.dumps(DOCUMENT), encoding="utf-8")

        graph = load_graph(path)

        assert graph.unit_count == 3
        assert graph.edge_count == 2

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "graph.json"
        path.write_text("{units", encoding="utf-8")

        with pytest.raises(GraphConsistencyError, match="not valid JSON"):
            load_graph(path)

    def test_non_utf8_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "graph.json"
        path.write_bytes(b'{"units": [{"name": "a.\xff"}]}')

        with pytest.raises(GraphConsistencyError, match="not UTF-8 text"):
            load_graph(path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_graph(tmp_path / "missing.json")
