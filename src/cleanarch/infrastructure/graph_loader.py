"""JSON snapshot loader for dependency graphs.

The graph-building collaborator (bytecode reader, AST parser, ...) dumps
its result as JSON; this module turns it into a DependencyGraph.

Format:
    {
      "units": [
        {
          "name": "app.core.Order",
          "package": "app.core",                 # optional, derived from name
          "kind": "class" | "interface" | "record",
          "constructor_visibility": "public" | "private" | "mixed",
          "location": {"file": "Order.java", "line": 3},   # optional
          "edges": [
            {
              "target": "java.util.List",
              "target_package": "java.util",     # optional, derived from target
              "location": {"file": "Order.java", "line": 12},
              "builtin": false                   # optional
            }
          ]
        }
      ]
    }
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TypeVar

from cleanarch.domain.exceptions.graph import GraphConsistencyError
from cleanarch.domain.model.enums import ConstructorVisibility, UnitKind
from cleanarch.domain.model.graph import DependencyGraph
from cleanarch.domain.model.location import SourceLocation
from cleanarch.domain.model.package_path import PackagePath
from cleanarch.domain.model.unit import Edge, Unit

logger = logging.getLogger(__name__)

T = TypeVar("T")

_KINDS: Mapping[str, UnitKind] = {
    "class": UnitKind.CLASS,
    "interface": UnitKind.INTERFACE,
    "record": UnitKind.RECORD_LIKE,
    "record_like": UnitKind.RECORD_LIKE,
}

_VISIBILITIES: Mapping[str, ConstructorVisibility] = {
    "public": ConstructorVisibility.PUBLIC,
    "private": ConstructorVisibility.PRIVATE,
    "mixed": ConstructorVisibility.MIXED,
}


def load_graph(path: Path) -> DependencyGraph:
    """Read a JSON snapshot file.

    Args:
        path: JSON file

    Returns:
        DependencyGraph

    Raises:
        FileNotFoundError: If path does not exist
        GraphConsistencyError: If the document is malformed
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise GraphConsistencyError(f"{path} is not UTF-8 text: {e}") from e
    except json.JSONDecodeError as e:
        raise GraphConsistencyError(f"{path} is not valid JSON: {e}") from e

    graph = graph_from_dict(data)
    logger.debug(
        "Loaded %d units and %d edges from %s", graph.unit_count, graph.edge_count, path
    )
    return graph


def graph_from_dict(data: object) -> DependencyGraph:
    """Build graph from a decoded JSON document.

    Args:
        data: Decoded document (see module docstring)

    Returns:
        DependencyGraph

    Raises:
        GraphConsistencyError: On missing keys, unknown enum values or
            invalid names
    """
    if not isinstance(data, Mapping) or not isinstance(data.get("units"), list):
        raise GraphConsistencyError("document must be an object with a 'units' list")

    return DependencyGraph.from_units(_unit_from_dict(raw) for raw in data["units"])


def _unit_from_dict(raw: object) -> Unit:
    if not isinstance(raw, Mapping) or not isinstance(raw.get("name"), str):
        raise GraphConsistencyError("unit must be an object with a 'name' string")

    name: str = raw["name"]
    try:
        package = _package(raw.get("package"), name)
        kind = _lookup(_KINDS, raw.get("kind", "class"), "kind")
        visibility = _lookup(
            _VISIBILITIES, raw.get("constructor_visibility", "public"), "constructor_visibility"
        )
        edges = tuple(_edge_from_dict(name, e) for e in raw.get("edges", ()))
        location = _location(raw.get("location"))
        return Unit(
            name=name,
            package=package,
            kind=kind,
            constructor_visibility=visibility,
            edges=edges,
            location=location,
        )
    except (ValueError, TypeError, KeyError) as e:
        raise GraphConsistencyError(str(e), name) from e


def _edge_from_dict(origin: str, raw: object) -> Edge:
    if not isinstance(raw, Mapping):
        raise TypeError("edge must be an object")

    target = raw["target"]
    if not isinstance(target, str):
        raise TypeError("edge target must be a string")
    location = _location(raw.get("location"))
    if location is None:
        raise ValueError(f"edge to '{target}' has no location")

    return Edge(
        origin=origin,
        target=target,
        target_package=_package(raw.get("target_package"), target),
        location=location,
        is_builtin=bool(raw.get("builtin", False)),
    )


def _package(value: object, qualified_name: str) -> PackagePath:
    if value is None:
        # Derive from name: everything before the last dot
        head, _, _ = qualified_name.rpartition(".")
        return PackagePath.parse(head)
    if not isinstance(value, str):
        raise TypeError(f"package must be a string, got {type(value).__name__}")
    return PackagePath.parse(value)


def _location(value: object) -> SourceLocation | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise TypeError("location must be an object with 'file' and 'line'")
    return SourceLocation(file=str(value["file"]), line=int(value.get("line", 0)))


def _lookup(table: Mapping[str, T], value: object, field: str) -> T:
    if not isinstance(value, str) or value.lower() not in table:
        raise ValueError(f"{field} must be one of {sorted(table)}, got {value!r}")
    return table[value.lower()]
