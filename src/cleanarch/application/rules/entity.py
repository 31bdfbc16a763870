"""Entity rules: purity of the core package and private construction."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cleanarch.application.rules._base import BaseRule, is_platform_edge
from cleanarch.domain.model.configuration import CONTRACT_EXCEPTION
from cleanarch.domain.model.enums import ConstructorVisibility, RuleCategory, UnitKind
from cleanarch.domain.model.rule_result import RuleResult
from cleanarch.domain.patterns import compile_pattern
from cleanarch.domain.predicates import all_of, resides_in_package, resides_outside_package, select

if TYPE_CHECKING:
    from cleanarch.domain.model.configuration import CleanArchitectureConfig
    from cleanarch.domain.model.graph import DependencyGraph
    from cleanarch.domain.model.violation import Violation


class EntityPurityRule(BaseRule):
    """Entities depend only on the platform, the core and accepted libraries."""

    name = "entity_does_not_depend_on_anyone"
    description = "The entity must not depend on any lib or framework."
    category = RuleCategory.PURITY

    def evaluate(
        self,
        graph: DependencyGraph,
        config: CleanArchitectureConfig,
    ) -> RuleResult:
        """One violation per edge leaving the allow-list."""
        accepted = (
            config.enterprise,
            *config.platform,
            *(compile_pattern(p) for p in config.accepted_entity_dependencies),
        )
        scope = select(graph, resides_in_package(config.enterprise))
        violations: list[Violation] = []

        for unit in scope:
            for edge in unit.edges:
                if is_platform_edge(edge, config):
                    continue
                if any(p.match(edge.target_package) for p in accepted):
                    continue
                violations.append(
                    self.violation(
                        unit_name=unit.name,
                        message=(
                            f"Entity {unit.name} depends on {edge.target} "
                            f"(package '{edge.target_package}') in {edge.location}"
                        ),
                        location=edge.location,
                        suggestion="Add the package to accepted_entity_dependencies "
                        "or move the code out of the core",
                    )
                )

        return RuleResult(
            rule_name=self.name,
            description=self.description,
            violations=tuple(violations),
            checked_count=len(scope),
        )


class PrivateEntityConstructorRule(BaseRule):
    """Entities outside the exception sub-package have only private constructors.

    Interfaces declare no constructors and are exempt. MIXED counts as a
    violation: only fully private construction passes.
    """

    name = "private_entity_constructor"
    description = "Entity should not have public constructor."
    category = RuleCategory.SHAPE

    def evaluate(
        self,
        graph: DependencyGraph,
        config: CleanArchitectureConfig,
    ) -> RuleResult:
        """One violation per non-private entity."""
        scope = select(
            graph,
            all_of(
                resides_in_package(config.enterprise),
                resides_outside_package(f"..{CONTRACT_EXCEPTION}.."),
            ),
        )
        violations = tuple(
            self.violation(
                unit_name=unit.name,
                message=(
                    f"Entity {unit.name} has {unit.constructor_visibility.name.lower()} "
                    f"constructors, expected only private"
                ),
                location=unit.location,
                suggestion="Make constructors private and expose a factory method",
            )
            for unit in scope
            if unit.kind != UnitKind.INTERFACE
            and unit.constructor_visibility != ConstructorVisibility.PRIVATE
        )

        return RuleResult(
            rule_name=self.name,
            description=self.description,
            violations=violations,
            checked_count=len(scope),
        )
