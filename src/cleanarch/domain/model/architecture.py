"""Layered architecture definition entities.

Provides immutable layer and access-directive definitions with a Builder
for fluent construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Self

from cleanarch.domain.exceptions.configuration import ConfigurationError
from cleanarch.domain.patterns import PackagePattern, compile_pattern


@dataclass(frozen=True, slots=True)
class Layer:
    """Named group of packages.

    Immutable value object with FAIL-FIRST validation.

    Attributes:
        name: Layer name (must not be empty)
        patterns: Package patterns defining membership (at least one)
    """

    name: str
    patterns: tuple[PackagePattern, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ConfigurationError("layer", "layer name must not be empty")
        if not self.patterns:
            raise ConfigurationError(
                f"layer '{self.name}'", "layer must have at least one package pattern"
            )

    @classmethod
    def of(cls, name: str, *patterns: str) -> Layer:
        """Create layer from pattern strings."""
        return cls(name=name, patterns=tuple(compile_pattern(p) for p in patterns))


class DirectiveKind(Enum):
    """Kind of access constraint declared on a layer."""

    MAY_ONLY_ACCESS = "may only access"
    MAY_ONLY_BE_ACCESSED_BY = "may only be accessed by"
    MAY_NOT_ACCESS_ANY_LAYER = "may not access any layer"
    MAY_NOT_BE_ACCESSED_BY_ANY_LAYER = "may not be accessed by any layer"

    @property
    def is_outgoing(self) -> bool:
        """True if the directive constrains edges leaving the layer."""
        return self in (DirectiveKind.MAY_ONLY_ACCESS, DirectiveKind.MAY_NOT_ACCESS_ANY_LAYER)

    @property
    def takes_layers(self) -> bool:
        """True if the directive carries an allowed-layer set."""
        return self in (DirectiveKind.MAY_ONLY_ACCESS, DirectiveKind.MAY_ONLY_BE_ACCESSED_BY)


@dataclass(frozen=True, slots=True)
class AccessDirective:
    """Constraint on edges entering or leaving one layer.

    Attributes:
        layer: Layer the directive is declared on
        kind: Constraint kind
        layers: Allowed counterpart layers (empty for the "any layer" kinds)
    """

    layer: str
    kind: DirectiveKind
    layers: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.layer:
            raise ConfigurationError("directive", "directive layer must not be empty")
        if self.kind.takes_layers and not self.layers:
            raise ConfigurationError(
                f"directive on '{self.layer}'", f"'{self.kind.value}' needs at least one layer"
            )
        if not self.kind.takes_layers and self.layers:
            raise ConfigurationError(
                f"directive on '{self.layer}'", f"'{self.kind.value}' takes no layers"
            )

    def allows(self, other_layer: str) -> bool:
        """Check if an edge to/from other_layer satisfies this directive.

        Args:
            other_layer: Layer of the opposite endpoint (never this layer)

        Returns:
            True if the directive is respected
        """
        if self.kind.takes_layers:
            return other_layer in self.layers
        return False

    def __str__(self) -> str:
        """Format as 'layer may only access [a, b]'."""
        if self.kind.takes_layers:
            return f"{self.layer} {self.kind.value} [{', '.join(sorted(self.layers))}]"
        return f"{self.layer} {self.kind.value}"


@dataclass(frozen=True, slots=True)
class LayeredArchitecture:
    """Ordered layers plus access directives.

    Layer declaration order decides membership when patterns overlap:
    the first matching layer wins.

    Attributes:
        name: Architecture description
        layers: Layers in declaration order
        directives: Directives in declaration order
    """

    name: str
    layers: tuple[Layer, ...]
    directives: tuple[AccessDirective, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ConfigurationError("architecture", "architecture name must not be empty")
        names = [layer.name for layer in self.layers]
        duplicates = {n for n in names if names.count(n) > 1}
        if duplicates:
            raise ConfigurationError("architecture", f"duplicate layers: {sorted(duplicates)}")

    def get_layer(self, name: str) -> Layer | None:
        """Get layer by name. Returns None if not found."""
        for layer in self.layers:
            if layer.name == name:
                return layer
        return None

    @property
    def layer_names(self) -> tuple[str, ...]:
        """Layer names in declaration order."""
        return tuple(layer.name for layer in self.layers)

    def directives_on(self, layer: str) -> tuple[AccessDirective, ...]:
        """Directives declared on a layer."""
        return tuple(d for d in self.directives if d.layer == layer)


class LayeredArchitectureBuilder:
    """Builder for LayeredArchitecture.

    Example:
        arch = (
            LayeredArchitectureBuilder("clean")
            .layer("core", "app.core..")
            .layer("usecase", "app.usecase..")
            .where_layer("core").may_not_access_any_layer()
            .where_layer("usecase").may_only_access("core")
            .build()
        )
    """

    def __init__(self, name: str) -> None:
        """Initialize builder with architecture name."""
        self._name = name
        self._layers: list[Layer] = []
        self._directives: list[AccessDirective] = []

    def layer(self, name: str, *patterns: str) -> Self:
        """Declare a layer defined by package patterns.

        Raises:
            ConfigurationError: If the layer is already declared or has no patterns
        """
        if any(layer.name == name for layer in self._layers):
            raise ConfigurationError(f"layer '{name}'", "layer already declared")
        self._layers.append(Layer.of(name, *patterns))
        return self

    def where_layer(self, name: str) -> _DirectiveClause:
        """Start a directive on a layer."""
        return _DirectiveClause(self, name)

    def add_directive(self, directive: AccessDirective) -> Self:
        """Add a directive."""
        self._directives.append(directive)
        return self

    def build(self) -> LayeredArchitecture:
        """Build immutable LayeredArchitecture.

        Directives naming undeclared layers are kept: the checker reports
        them as configuration warnings.
        """
        return LayeredArchitecture(
            name=self._name,
            layers=tuple(self._layers),
            directives=tuple(self._directives),
        )


class _DirectiveClause:
    """Pending directive on one layer (returned by where_layer)."""

    def __init__(self, builder: LayeredArchitectureBuilder, layer: str) -> None:
        self._builder = builder
        self._layer = layer

    def _add(self, kind: DirectiveKind, layers: tuple[str, ...] = ()) -> LayeredArchitectureBuilder:
        return self._builder.add_directive(
            AccessDirective(layer=self._layer, kind=kind, layers=frozenset(layers))
        )

    def may_only_access(self, *layers: str) -> LayeredArchitectureBuilder:
        return self._add(DirectiveKind.MAY_ONLY_ACCESS, layers)

    def may_only_be_accessed_by(self, *layers: str) -> LayeredArchitectureBuilder:
        return self._add(DirectiveKind.MAY_ONLY_BE_ACCESSED_BY, layers)

    def may_not_access_any_layer(self) -> LayeredArchitectureBuilder:
        return self._add(DirectiveKind.MAY_NOT_ACCESS_ANY_LAYER)

    def may_not_be_accessed_by_any_layer(self) -> LayeredArchitectureBuilder:
        return self._add(DirectiveKind.MAY_NOT_BE_ACCESSED_BY_ANY_LAYER)
