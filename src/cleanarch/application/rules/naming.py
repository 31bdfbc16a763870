"""Naming and shape conventions for request/response contracts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cleanarch.application.rules._base import BaseRule
from cleanarch.domain.model.configuration import CONTRACT_REQUEST, CONTRACT_RESPONSE, ENUMS
from cleanarch.domain.model.enums import RuleCategory, UnitKind
from cleanarch.domain.model.rule_result import RuleResult
from cleanarch.domain.predicates import (
    all_of,
    any_of,
    has_simple_name_ending_with,
    resides_in_package,
    resides_outside_package,
    select,
)

if TYPE_CHECKING:
    from cleanarch.domain.model.configuration import CleanArchitectureConfig
    from cleanarch.domain.model.graph import DependencyGraph


class ContractNamingRule(BaseRule):
    """Units of a request (response) package are named *Request (*Response).

    Units of an enums sub-package are exempt.
    """

    category = RuleCategory.NAMING

    def __init__(self, contract_type: str) -> None:
        """Initialize rule for one contract type.

        Args:
            contract_type: "request" or "response"
        """
        if contract_type not in (CONTRACT_REQUEST, CONTRACT_RESPONSE):
            raise ValueError(f"contract_type must be request or response, got {contract_type!r}")
        self._contract_type = contract_type
        self._suffix = contract_type.capitalize()
        self.name = f"{contract_type}_objects_with_correct_name"
        self.description = (
            f"{self._suffix} objects should have a name ending with '{self._suffix}'."
        )

    def evaluate(
        self,
        graph: DependencyGraph,
        config: CleanArchitectureConfig,
    ) -> RuleResult:
        scope = select(
            graph,
            all_of(
                resides_in_package(f"..{self._contract_type}.."),
                resides_outside_package(f"..{ENUMS}.."),
            ),
        )
        well_named = has_simple_name_ending_with(self._suffix)
        violations = tuple(
            self.violation(
                unit_name=unit.name,
                message=f"{unit.name} does not have a simple name ending with '{self._suffix}'",
                location=unit.location,
                suggestion=f"Rename to {unit.simple_name}{self._suffix}",
            )
            for unit in scope
            if not well_named(unit)
        )
        return RuleResult(
            rule_name=self.name,
            description=self.description,
            violations=violations,
            checked_count=len(scope),
        )


class ContractsAreRecordsRule(BaseRule):
    """Request and response types are immutable records."""

    name = "requests_and_responses_are_records"
    description = "Requests and responses should be records."
    category = RuleCategory.SHAPE

    def evaluate(
        self,
        graph: DependencyGraph,
        config: CleanArchitectureConfig,
    ) -> RuleResult:
        scope = select(
            graph,
            any_of(
                resides_in_package(f"..{CONTRACT_REQUEST}.."),
                resides_in_package(f"..{CONTRACT_RESPONSE}.."),
            ),
        )
        violations = tuple(
            self.violation(
                unit_name=unit.name,
                message=f"{unit.name} is a {unit.kind.name.lower()}, expected a record",
                location=unit.location,
                suggestion="Declare it as an immutable record (frozen dataclass)",
            )
            for unit in scope
            if unit.kind != UnitKind.RECORD_LIKE
        )
        return RuleResult(
            rule_name=self.name,
            description=self.description,
            violations=violations,
            checked_count=len(scope),
        )
