"""Main facade for rule evaluation.

ArchitectureEngine runs a fixed, ordered rule set against one immutable
graph snapshot and merges the outcomes into a CheckResult.
Composition-based: accepts rules and reporter.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Self

from cleanarch.application.rules import clean_architecture_rules
from cleanarch.domain.exceptions.violation import ArchitectureViolationError
from cleanarch.domain.model.check_result import CheckResult
from cleanarch.domain.model.check_stats import CheckStats
from cleanarch.domain.predicates import resides_in_package

if TYPE_CHECKING:
    from cleanarch.domain.model.configuration import CleanArchitectureConfig
    from cleanarch.domain.model.graph import DependencyGraph
    from cleanarch.domain.model.rule_result import RuleResult
    from cleanarch.domain.ports.reporter import ReporterProtocol
    from cleanarch.domain.ports.rule import RuleProtocol

logger = logging.getLogger(__name__)


class ArchitectureEngine:
    """Evaluate rules against a dependency graph.

    Rules are independent and read-only, so they may run on a thread pool.
    Results are always merged in rule-declaration order: identical input
    gives identical output, sequential or parallel.

    Example:
        engine = ArchitectureEngine.clean_architecture(graph, config)
        result = engine.check()
        if not result.passed:
            print(f"Violations: {result.violation_count}")
    """

    def __init__(
        self,
        graph: DependencyGraph,
        config: CleanArchitectureConfig,
        *,
        rules: Sequence[RuleProtocol] = (),
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize engine with dependencies.

        Args:
            graph: Dependency graph snapshot
            config: Package roots; main_project restricts the graph
            rules: Rules to evaluate, in reporting order
            reporter: Optional reporter for output

        Raises:
            ValueError: If two rules share a name
        """
        names = [rule.name for rule in rules]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate rule names: {duplicates}")

        if config.main_project is not None:
            graph = graph.restricted_to(resides_in_package(config.main_project))

        self._graph = graph
        self._config = config
        self._rules = tuple(rules)
        self._reporter = reporter

    @classmethod
    def clean_architecture(
        cls,
        graph: DependencyGraph,
        config: CleanArchitectureConfig,
        *,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create engine with the full clean-architecture rule set.

        Args:
            graph: Dependency graph snapshot
            config: Package roots
            reporter: Optional reporter

        Returns:
            ArchitectureEngine with every built-in rule
        """
        return cls(graph, config, rules=clean_architecture_rules(), reporter=reporter)

    @property
    def rules(self) -> tuple[RuleProtocol, ...]:
        """Rules in evaluation order."""
        return self._rules

    @property
    def graph(self) -> DependencyGraph:
        """Graph snapshot the rules see (after main_project restriction)."""
        return self._graph

    def check(self, *, max_workers: int | None = None) -> CheckResult:
        """Evaluate every rule and return the merged result.

        Args:
            max_workers: Thread pool size. None or 1 = sequential.

        Returns:
            CheckResult with per-rule outcomes in declaration order

        Raises:
            ValueError: If max_workers < 1
        """
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")

        start_time = time.perf_counter()

        if max_workers is None or max_workers == 1 or len(self._rules) < 2:
            rule_results = tuple(self._evaluate(rule) for rule in self._rules)
        else:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                # map() yields in submission order
                rule_results = tuple(executor.map(self._evaluate, self._rules))

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        result = CheckResult(
            rule_results=rule_results,
            stats=CheckStats(
                units_analyzed=self._graph.unit_count,
                edges_analyzed=self._graph.edge_count,
                rules_run=len(rule_results),
                analysis_time_ms=elapsed_ms,
            ),
        )

        for warning in result.warnings:
            logger.warning("Configuration warning: %s", warning)

        logger.info(
            "Architecture check %s: %d rule(s), %d violation(s) in %.1f ms",
            result.verdict.name,
            len(rule_results),
            result.violation_count,
            elapsed_ms,
        )

        # Report if reporter configured
        if self._reporter is not None:
            self._reporter.report(result)

        return result

    def assert_check(self, *, max_workers: int | None = None) -> CheckResult:
        """Check and raise if any violation was found.

        Raises:
            ArchitectureViolationError: With every violation of every rule
        """
        result = self.check(max_workers=max_workers)
        if not result.passed:
            raise ArchitectureViolationError(result.violations)
        return result

    def _evaluate(self, rule: RuleProtocol) -> RuleResult:
        result = rule.evaluate(self._graph, self._config)
        logger.debug(
            "Rule %s: %d in scope, %d violation(s)",
            rule.name,
            result.checked_count,
            len(result.violations),
        )
        return result
