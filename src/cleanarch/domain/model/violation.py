"""Rule violation and configuration warning values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cleanarch.domain.model.enums import Severity

if TYPE_CHECKING:
    from cleanarch.domain.model.enums import RuleCategory
    from cleanarch.domain.model.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Violation:
    """Architecture rule violation.

    Attributes:
        rule_name: Name of violated rule
        unit_name: Unit (or "origin -> target" pair) implicated
        message: Human-readable message
        location: Source location, None if the graph carries none
        category: Rule category
        severity: ERROR for broken rules, WARNING for diagnostics
        suggestion: Fix suggestion
    """

    rule_name: str
    unit_name: str
    message: str
    location: SourceLocation | None
    category: RuleCategory
    severity: Severity = Severity.ERROR
    suggestion: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_name:
            raise ValueError("rule_name must not be empty")
        if not self.unit_name:
            raise ValueError("unit_name must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")

    def __str__(self) -> str:
        """Format violation for display."""
        lines = [f"[{self.severity.name}] {self.rule_name}: {self.message}"]
        if self.location is not None:
            lines.append(f"  at {self.location}")
        lines.append(f"  unit: {self.unit_name}")
        if self.suggestion:
            lines.append(f"  suggestion: {self.suggestion}")
        return "\n".join(lines)


@dataclass(frozen=True, slots=True)
class ConfigurationWarning:
    """Non-fatal configuration problem found while evaluating a rule.

    Attributes:
        rule_name: Rule that noticed the problem
        message: What is wrong
        directive: Directive the warning is attached to, if any
    """

    rule_name: str
    message: str
    directive: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_name:
            raise ValueError("rule_name must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")

    def __str__(self) -> str:
        """Format warning for display."""
        where = f" [{self.directive}]" if self.directive else ""
        return f"{self.rule_name}{where}: {self.message}"
