"""Check result aggregate for architecture analysis."""

from __future__ import annotations

from dataclasses import dataclass, field

from cleanarch.domain.model.check_stats import CheckStats
from cleanarch.domain.model.enums import Verdict
from cleanarch.domain.model.rule_result import RuleResult
from cleanarch.domain.model.violation import ConfigurationWarning, Violation


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of architecture check.

    Immutable aggregate of every rule outcome, in rule-declaration order.
    Used by ReporterProtocol.report() method.

    Attributes:
        rule_results: One result per evaluated rule
        stats: Analysis statistics
    """

    rule_results: tuple[RuleResult, ...]
    stats: CheckStats = field(default_factory=CheckStats.empty)

    @property
    def violations(self) -> tuple[Violation, ...]:
        """All violations, grouped by rule in declaration order."""
        return tuple(v for r in self.rule_results for v in r.violations)

    @property
    def warnings(self) -> tuple[ConfigurationWarning, ...]:
        """All configuration warnings."""
        return tuple(w for r in self.rule_results for w in r.warnings)

    @property
    def passed(self) -> bool:
        """Check if analysis passed (no violations)."""
        return all(r.passed for r in self.rule_results)

    @property
    def verdict(self) -> Verdict:
        """PASS or FAIL."""
        return Verdict.PASS if self.passed else Verdict.FAIL

    @property
    def violation_count(self) -> int:
        """Number of violations."""
        return sum(len(r.violations) for r in self.rule_results)

    @property
    def failed_rules(self) -> tuple[str, ...]:
        """Names of rules with at least one violation."""
        return tuple(r.rule_name for r in self.rule_results if r.failed)

    def result_for(self, rule_name: str) -> RuleResult | None:
        """Get result of a rule by name. Returns None if rule was not run."""
        for result in self.rule_results:
            if result.rule_name == rule_name:
                return result
        return None

    @classmethod
    def empty(cls) -> CheckResult:
        """Create empty check result (passed, no violations)."""
        return cls(rule_results=())
