"""Clean-architecture facade.

Entry point mirroring how a test suite states its architecture: build it
from a graph and package roots, then check everything or one rule group.

Example:
    clean = CleanArchitecture(graph, config)
    clean.assert_check()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cleanarch.application.rules import (
    clean_architecture_rules,
    entity_rules,
    layer_rules,
    other_rules,
    use_case_rules,
)
from cleanarch.application.services.engine import ArchitectureEngine

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cleanarch.domain.model.check_result import CheckResult
    from cleanarch.domain.model.configuration import CleanArchitectureConfig
    from cleanarch.domain.model.graph import DependencyGraph
    from cleanarch.domain.ports.reporter import ReporterProtocol
    from cleanarch.domain.ports.rule import RuleProtocol


class CleanArchitecture:
    """Clean-architecture rule set bound to one graph snapshot.

    Attributes:
        _graph: Dependency graph
        _config: Package roots
    """

    def __init__(
        self,
        graph: DependencyGraph,
        config: CleanArchitectureConfig,
        *,
        reporter: ReporterProtocol | None = None,
        max_workers: int | None = None,
    ) -> None:
        """Initialize facade.

        Args:
            graph: Dependency graph snapshot
            config: Package roots
            reporter: Optional reporter called after each check
            max_workers: Evaluate rules on a thread pool of this size

        Raises:
            TypeError: If graph or config is None
        """
        if graph is None:
            raise TypeError("graph must not be None")
        if config is None:
            raise TypeError("config must not be None")
        self._graph = graph
        self._config = config
        self._reporter = reporter
        self._max_workers = max_workers

    @property
    def config(self) -> CleanArchitectureConfig:
        """Package roots."""
        return self._config

    @property
    def graph(self) -> DependencyGraph:
        """Graph snapshot."""
        return self._graph

    def rules(self) -> tuple[RuleProtocol, ...]:
        """Every built-in rule in evaluation order."""
        return clean_architecture_rules()

    def check(self) -> CheckResult:
        """Evaluate every rule."""
        return self._run(clean_architecture_rules())

    def assert_check(self) -> CheckResult:
        """Evaluate every rule, raise ArchitectureViolationError on violations."""
        return self._engine(clean_architecture_rules()).assert_check(
            max_workers=self._max_workers
        )

    def check_layers(self) -> CheckResult:
        """Evaluate layer isolation only."""
        return self._run(layer_rules())

    def check_entity_rules(self) -> CheckResult:
        """Evaluate entity purity and private constructors."""
        return self._run(entity_rules())

    def check_use_case_rules(self) -> CheckResult:
        """Evaluate use-case isolation, contract ownership and ports."""
        return self._run(use_case_rules())

    def check_other_rules(self) -> CheckResult:
        """Evaluate contract naming and record shape."""
        return self._run(other_rules())

    def check_rules(self, rules: Sequence[RuleProtocol]) -> CheckResult:
        """Evaluate custom rules against the same graph and config."""
        return self._run(rules)

    def _engine(self, rules: Sequence[RuleProtocol]) -> ArchitectureEngine:
        return ArchitectureEngine(
            self._graph,
            self._config,
            rules=rules,
            reporter=self._reporter,
        )

    def _run(self, rules: Sequence[RuleProtocol]) -> CheckResult:
        return self._engine(rules).check(max_workers=self._max_workers)
