"""Outcome of one rule evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cleanarch.domain.model.violation import ConfigurationWarning, Violation


@dataclass(frozen=True, slots=True)
class RuleResult:
    """Result of rule check.

    Attributes:
        rule_name: Name of checked rule
        description: What the rule demands
        violations: Found violations, in discovery order
        warnings: Configuration warnings
        checked_count: Number of units (or edges) in the rule's scope
    """

    rule_name: str
    description: str
    violations: tuple[Violation, ...] = ()
    warnings: tuple[ConfigurationWarning, ...] = ()
    checked_count: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_name:
            raise ValueError("rule_name must not be empty")

        if self.checked_count < 0:
            raise ValueError(f"checked_count must be >= 0, got {self.checked_count}")

        for violation in self.violations:
            if violation.rule_name != self.rule_name:
                raise ValueError(
                    f"violation of '{violation.rule_name}' in result of '{self.rule_name}'"
                )

    @property
    def passed(self) -> bool:
        """True if rule produced no violations."""
        return not self.violations

    @property
    def failed(self) -> bool:
        """True if rule check failed."""
        return not self.passed
