"""Use-case rules: no lateral calls, one owner per request/response contract."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cleanarch.application.rules._base import BaseRule, is_platform_edge
from cleanarch.domain.model.configuration import (
    CONTRACT_EXCEPTION,
    CONTRACT_REQUEST,
    CONTRACT_RESPONSE,
)
from cleanarch.domain.model.enums import RuleCategory
from cleanarch.domain.model.rule_result import RuleResult
from cleanarch.domain.predicates import all_of, resides_in_package, select

if TYPE_CHECKING:
    from cleanarch.domain.model.configuration import CleanArchitectureConfig
    from cleanarch.domain.model.graph import DependencyGraph
    from cleanarch.domain.model.unit import Edge, Unit
    from cleanarch.domain.model.violation import Violation

# Request, response and exception types travel freely between use cases
_CONTRACT_SEGMENTS = frozenset({CONTRACT_REQUEST, CONTRACT_RESPONSE, CONTRACT_EXCEPTION})


class UseCaseIsolationRule(BaseRule):
    """Use cases do not call other use cases.

    Ignored edges: self edges, platform edges, edges to request/response/
    exception packages and edges to the port package.
    """

    name = "use_cases_not_call_other_use_cases"
    description = "Use cases should not call other use cases."
    category = RuleCategory.ISOLATION

    def evaluate(
        self,
        graph: DependencyGraph,
        config: CleanArchitectureConfig,
    ) -> RuleResult:
        """One violation per edge from a use case to another use-case unit."""
        scope = select(graph, resides_in_package(config.application))
        violations: list[Violation] = []

        for unit in scope:
            for edge in unit.edges:
                if self._calls_use_case(edge, config):
                    violations.append(
                        self.violation(
                            unit_name=unit.name,
                            message=(
                                f"Class {unit.name} calls use case {edge.target} "
                                f"in {edge.location}"
                            ),
                            location=edge.location,
                            suggestion="Extract the shared logic into an entity or a port",
                        )
                    )

        return RuleResult(
            rule_name=self.name,
            description=self.description,
            violations=tuple(violations),
            checked_count=len(scope),
        )

    @staticmethod
    def _calls_use_case(edge: Edge, config: CleanArchitectureConfig) -> bool:
        if edge.is_self or is_platform_edge(edge, config):
            return False
        if edge.target_package.last in _CONTRACT_SEGMENTS:
            return False
        if config.communication.match(edge.target_package):
            return False
        return config.application.match(edge.target_package)


class ContractOwnershipRule(BaseRule):
    """A request (or response) type is used by exactly one use case.

    The owner of `app.usecase.order.request.OrderRequest` is the package
    `app.usecase.order`. The contract passes only when exactly one unit of
    the use-case package uses it and that unit lives under the owner
    package. Other contracts count as users. Unused contracts fail as well.
    """

    category = RuleCategory.CONTRACTS

    def __init__(self, contract_type: str) -> None:
        """Initialize rule for one contract type.

        Args:
            contract_type: "request" or "response"
        """
        if contract_type not in (CONTRACT_REQUEST, CONTRACT_RESPONSE):
            raise ValueError(f"contract_type must be request or response, got {contract_type!r}")
        self._contract_type = contract_type
        self.name = f"{contract_type}_used_by_only_one_use_case"
        self.description = f"A {contract_type} must be used by only one use case."

    def evaluate(
        self,
        graph: DependencyGraph,
        config: CleanArchitectureConfig,
    ) -> RuleResult:
        """One violation per contract without exactly one owning use case."""
        scope = select(
            graph,
            all_of(
                resides_in_package(config.application),
                resides_in_package(f"..{self._contract_type}.."),
            ),
        )
        violations: list[Violation] = []

        for contract in scope:
            violation = self._check_contract(graph, config, contract)
            if violation is not None:
                violations.append(violation)

        return RuleResult(
            rule_name=self.name,
            description=self.description,
            violations=tuple(violations),
            checked_count=len(scope),
        )

    def _check_contract(
        self,
        graph: DependencyGraph,
        config: CleanArchitectureConfig,
        contract: Unit,
    ) -> Violation | None:
        owner = contract.package.strip_from_last(self._contract_type)
        usages = self._usages(graph, config, contract)

        origins: list[str] = []
        for edge in usages:
            if edge.origin not in origins:
                origins.append(edge.origin)

        if len(origins) == 1 and owner is not None:
            user = graph.get(origins[0])
            if user is not None and owner.is_prefix_of(user.package):
                return None

        found = ", ".join(str(e.location) for e in usages) or "none"
        return self.violation(
            unit_name=contract.name,
            message=(
                f"{self._contract_type} {contract.name} is used in use cases: [{found}] "
                f"(expected exactly one use case in '{owner}')"
            ),
            location=contract.location,
            suggestion=f"Give each use case its own {self._contract_type} type",
        )

    @staticmethod
    def _usages(
        graph: DependencyGraph,
        config: CleanArchitectureConfig,
        contract: Unit,
    ) -> tuple[Edge, ...]:
        """Inbound edges coming from use-case units (contracts included)."""
        usages: list[Edge] = []
        for edge in graph.dependents_of(contract.name):
            if edge.is_self:
                continue
            origin = graph.get(edge.origin)
            if origin is None or not config.application.match(origin.package):
                continue
            usages.append(edge)
        return tuple(usages)
