"""Layer isolation rule.

Checks every edge between two different layers against the access
directives declared on both endpoint layers. Edges with an endpoint outside
every layer are ignored: only dependencies inside the layered model are
policed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cleanarch.application.rules._base import BaseRule
from cleanarch.domain.model.architecture import (
    AccessDirective,
    LayeredArchitecture,
    LayeredArchitectureBuilder,
)
from cleanarch.domain.model.enums import RuleCategory, Severity
from cleanarch.domain.model.rule_result import RuleResult
from cleanarch.domain.model.violation import ConfigurationWarning, Violation

if TYPE_CHECKING:
    from cleanarch.domain.model.configuration import CleanArchitectureConfig
    from cleanarch.domain.model.graph import DependencyGraph
    from cleanarch.domain.model.package_path import PackagePath
    from cleanarch.domain.model.unit import Edge

ENTERPRISE_BUSINESS_LAYER = "enterprise_business"
APPLICATION_BUSINESS_LAYER = "application_business"
INTERFACE_ADAPTERS_LAYER = "interface_adapters"


def clean_architecture_layers(config: CleanArchitectureConfig) -> LayeredArchitecture:
    """Build the three clean-architecture layers and their directives.

    Args:
        config: Package roots

    Returns:
        LayeredArchitecture (core <- use cases <- adapters)
    """
    return (
        LayeredArchitectureBuilder("The layers of Clean Architecture should be respected.")
        .layer(ENTERPRISE_BUSINESS_LAYER, config.enterprise_business)
        .layer(APPLICATION_BUSINESS_LAYER, config.application_business)
        .layer(
            INTERFACE_ADAPTERS_LAYER,
            config.interface_adapters_controller,
            config.interface_adapters_infra,
            config.interface_adapters_presenter,
        )
        .where_layer(INTERFACE_ADAPTERS_LAYER)
        .may_not_be_accessed_by_any_layer()
        .where_layer(INTERFACE_ADAPTERS_LAYER)
        .may_only_access(APPLICATION_BUSINESS_LAYER)
        .where_layer(APPLICATION_BUSINESS_LAYER)
        .may_only_be_accessed_by(INTERFACE_ADAPTERS_LAYER)
        .where_layer(APPLICATION_BUSINESS_LAYER)
        .may_only_access(ENTERPRISE_BUSINESS_LAYER)
        .where_layer(ENTERPRISE_BUSINESS_LAYER)
        .may_only_be_accessed_by(APPLICATION_BUSINESS_LAYER)
        .where_layer(ENTERPRISE_BUSINESS_LAYER)
        .may_not_access_any_layer()
        .build()
    )


@dataclass(slots=True)
class _Membership:
    """Package -> layer resolution with overlap bookkeeping.

    Mutable scratch state, local to one evaluate() call.
    """

    architecture: LayeredArchitecture
    resolved: dict[PackagePath, str | None] = field(default_factory=dict)
    overlaps: dict[PackagePath, tuple[str, ...]] = field(default_factory=dict)
    matched: dict[str, int] = field(default_factory=dict)
    owned: dict[str, int] = field(default_factory=dict)

    def layer_of(self, package: PackagePath) -> str | None:
        """First layer in declaration order whose patterns match package."""
        if package in self.resolved:
            return self.resolved[package]

        hits = tuple(
            layer.name
            for layer in self.architecture.layers
            if any(p.match(package) for p in layer.patterns)
        )
        for name in hits:
            self.matched[name] = self.matched.get(name, 0) + 1
        if hits:
            self.owned[hits[0]] = self.owned.get(hits[0], 0) + 1
        if len(hits) > 1:
            self.overlaps[package] = hits

        owner = hits[0] if hits else None
        self.resolved[package] = owner
        return owner

    def shadowed_layers(self) -> tuple[str, ...]:
        """Layers that matched packages but never owned one."""
        return tuple(
            layer.name
            for layer in self.architecture.layers
            if self.matched.get(layer.name, 0) > 0 and self.owned.get(layer.name, 0) == 0
        )


class LayerIsolationRule(BaseRule):
    """Enforce access directives across named layers.

    Intra-layer edges are always permitted. An edge breaking several
    directives yields a single violation listing all of them.

    Violation severity: ERROR.
    Fully shadowed layers add a WARNING diagnostic violation.
    """

    category = RuleCategory.BOUNDARIES

    def __init__(
        self,
        architecture: LayeredArchitecture | None = None,
        *,
        name: str = "layers_are_respected",
    ) -> None:
        """Initialize rule.

        Args:
            architecture: Layers and directives. None = clean-architecture
                layers built from the config at evaluation time.
            name: Rule name
        """
        self.name = name
        self._architecture = architecture
        self.description = (
            architecture.name
            if architecture is not None
            else "The layers of Clean Architecture should be respected."
        )

    def evaluate(
        self,
        graph: DependencyGraph,
        config: CleanArchitectureConfig,
    ) -> RuleResult:
        """Check every inter-layer edge against the directives.

        Args:
            graph: Dependency graph
            config: Package roots (used when no explicit architecture was given)

        Returns:
            RuleResult with one violation per offending edge
        """
        architecture = self._architecture or clean_architecture_layers(config)
        membership = _Membership(architecture)
        warnings = list(self._dangling_directives(architecture))

        for unit in graph.units:
            membership.layer_of(unit.package)

        violations: list[Violation] = []
        checked = 0

        for edge in graph.edges():
            origin_unit = graph.get(edge.origin)
            if origin_unit is None:
                continue
            origin_layer = membership.layer_of(origin_unit.package)
            target_layer = membership.layer_of(edge.target_package)

            # Only dependencies between two different layers are policed
            if origin_layer is None or target_layer is None or origin_layer == target_layer:
                continue

            checked += 1
            broken = self._broken_directives(architecture, origin_layer, target_layer)
            if broken:
                violations.append(self._edge_violation(edge, origin_layer, target_layer, broken))

        warnings.extend(self._overlap_warnings(membership))
        warnings.extend(self._empty_layer_warnings(architecture, membership))
        violations.extend(self._shadowed_diagnostics(membership))

        return RuleResult(
            rule_name=self.name,
            description=self.description,
            violations=tuple(violations),
            warnings=tuple(warnings),
            checked_count=checked,
        )

    @staticmethod
    def _broken_directives(
        architecture: LayeredArchitecture,
        origin_layer: str,
        target_layer: str,
    ) -> tuple[AccessDirective, ...]:
        outgoing = (
            d
            for d in architecture.directives_on(origin_layer)
            if d.kind.is_outgoing and not d.allows(target_layer)
        )
        incoming = (
            d
            for d in architecture.directives_on(target_layer)
            if not d.kind.is_outgoing and not d.allows(origin_layer)
        )
        return (*outgoing, *incoming)

    def _edge_violation(
        self,
        edge: Edge,
        origin_layer: str,
        target_layer: str,
        broken: tuple[AccessDirective, ...],
    ) -> Violation:
        return self.violation(
            unit_name=edge.origin,
            message=(
                f"Layer '{origin_layer}' must not access layer '{target_layer}': "
                f"{edge.origin} depends on {edge.target} in {edge.location} "
                f"(violates: {'; '.join(str(d) for d in broken)})"
            ),
            location=edge.location,
            suggestion="Invert the dependency through an interface owned by the inner layer",
        )

    def _dangling_directives(
        self, architecture: LayeredArchitecture
    ) -> tuple[ConfigurationWarning, ...]:
        declared = set(architecture.layer_names)
        warnings: list[ConfigurationWarning] = []
        for directive in architecture.directives:
            unknown = sorted(({directive.layer} | directive.layers) - declared)
            if unknown:
                warnings.append(
                    ConfigurationWarning(
                        rule_name=self.name,
                        message=f"directive names undeclared layers: {unknown}",
                        directive=str(directive),
                    )
                )
        return tuple(warnings)

    def _overlap_warnings(self, membership: _Membership) -> tuple[ConfigurationWarning, ...]:
        return tuple(
            ConfigurationWarning(
                rule_name=self.name,
                message=(
                    f"package '{package}' matches layers {list(layers)}; "
                    f"assigned to '{layers[0]}' (first declared)"
                ),
            )
            for package, layers in membership.overlaps.items()
        )

    def _empty_layer_warnings(
        self,
        architecture: LayeredArchitecture,
        membership: _Membership,
    ) -> tuple[ConfigurationWarning, ...]:
        return tuple(
            ConfigurationWarning(
                rule_name=self.name,
                message=f"layer '{layer.name}' matches no package of the graph",
            )
            for layer in architecture.layers
            if membership.matched.get(layer.name, 0) == 0
        )

    def _shadowed_diagnostics(self, membership: _Membership) -> tuple[Violation, ...]:
        return tuple(
            self.violation(
                unit_name=layer,
                message=(
                    f"every package of layer '{layer}' also belongs to an earlier layer; "
                    f"its directives can never apply"
                ),
                location=None,
                severity=Severity.WARNING,
                category=RuleCategory.CONFIGURATION,
                suggestion="Make the layer patterns disjoint",
            )
            for layer in membership.shadowed_layers()
        )
