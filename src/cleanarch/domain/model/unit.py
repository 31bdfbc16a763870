"""Code unit and dependency edge entities."""

from __future__ import annotations

from dataclasses import dataclass

from cleanarch.domain.model.enums import ConstructorVisibility, UnitKind
from cleanarch.domain.model.location import SourceLocation
from cleanarch.domain.model.package_path import PackagePath


@dataclass(frozen=True, slots=True)
class Edge:
    """Directed dependency from one unit to another.

    Targets are referenced by name: the target may be absent from the
    graph (library code), in which case only target_package is known.

    Attributes:
        origin: Fully qualified name of the depending unit
        target: Fully qualified name of the unit depended upon
        target_package: Package of the target
        location: Where the dependency occurs
        is_builtin: Target belongs to the language platform/runtime
    """

    origin: str
    target: str
    target_package: PackagePath
    location: SourceLocation
    is_builtin: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.origin:
            raise ValueError("edge origin must not be empty")
        if not self.target:
            raise ValueError("edge target must not be empty")

    @property
    def is_self(self) -> bool:
        """True if the unit depends on itself."""
        return self.origin == self.target

    def __str__(self) -> str:
        """Format as origin -> target (location)."""
        return f"{self.origin} -> {self.target} ({self.location})"


@dataclass(frozen=True, slots=True)
class Unit:
    """Named code element (class, interface or record-like type).

    Attributes:
        name: Fully qualified name (package.SimpleName)
        package: Package the unit resides in
        kind: CLASS/INTERFACE/RECORD_LIKE
        constructor_visibility: PUBLIC/PRIVATE/MIXED
        edges: Outbound dependencies, origin is always this unit
        location: Declaration site, if known
    """

    name: str
    package: PackagePath
    kind: UnitKind = UnitKind.CLASS
    constructor_visibility: ConstructorVisibility = ConstructorVisibility.PUBLIC
    edges: tuple[Edge, ...] = ()
    location: SourceLocation | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("unit name must not be empty")

        prefix = str(self.package)
        if prefix and not self.name.startswith(prefix + "."):
            raise ValueError(f"unit name '{self.name}' must start with package '{prefix}'")

        for edge in self.edges:
            if edge.origin != self.name:
                raise ValueError(f"edge origin '{edge.origin}' must be owning unit '{self.name}'")

    @property
    def simple_name(self) -> str:
        """Name without package prefix."""
        prefix = str(self.package)
        if not prefix:
            return self.name
        return self.name[len(prefix) + 1 :]

    def __str__(self) -> str:
        """Return fully qualified name."""
        return self.name
