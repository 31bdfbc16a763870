"""Port package rule: only interfaces cross the core/adapter boundary."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cleanarch.application.rules._base import BaseRule
from cleanarch.domain.model.enums import RuleCategory, UnitKind
from cleanarch.domain.model.rule_result import RuleResult
from cleanarch.domain.predicates import resides_in_package, select

if TYPE_CHECKING:
    from cleanarch.domain.model.configuration import CleanArchitectureConfig
    from cleanarch.domain.model.graph import DependencyGraph


class CommunicationThroughInterfaceRule(BaseRule):
    """Every unit in the port package is an interface."""

    name = "communication_with_external_through_interface"
    description = "Communication between core and adapters should happen through interfaces."
    category = RuleCategory.SHAPE

    def evaluate(
        self,
        graph: DependencyGraph,
        config: CleanArchitectureConfig,
    ) -> RuleResult:
        scope = select(graph, resides_in_package(config.communication))
        violations = tuple(
            self.violation(
                unit_name=unit.name,
                message=f"{unit.name} is a {unit.kind.name.lower()}, expected an interface",
                location=unit.location,
                suggestion="Move the implementation to an adapter package",
            )
            for unit in scope
            if unit.kind != UnitKind.INTERFACE
        )
        return RuleResult(
            rule_name=self.name,
            description=self.description,
            violations=violations,
            checked_count=len(scope),
        )
