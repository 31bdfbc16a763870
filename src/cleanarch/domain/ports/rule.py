"""Rule protocol for architecture rules.

Users extend cleanarch by implementing this Protocol.
Rules are side-effect free: they read the graph and return a result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from cleanarch.domain.model.configuration import CleanArchitectureConfig
    from cleanarch.domain.model.graph import DependencyGraph
    from cleanarch.domain.model.rule_result import RuleResult


class RuleProtocol(Protocol):
    """Contract for rules.

    Example:
        class NoUtilsPackage:
            name = "no_utils_package"
            description = "Nothing may live in a utils package."

            def evaluate(
                self,
                graph: DependencyGraph,
                config: CleanArchitectureConfig,
            ) -> RuleResult:
                scope = select(graph, resides_in_package("..utils.."))
                violations = tuple(... for unit in scope)
                return RuleResult(self.name, self.description, violations, checked_count=len(scope))
    """

    name: str
    """Rule identifier, unique within a rule set."""

    description: str
    """What the rule demands, shown in reports."""

    def evaluate(
        self,
        graph: DependencyGraph,
        config: CleanArchitectureConfig,
    ) -> RuleResult:
        """Evaluate rule against graph snapshot.

        Must not raise for a well-formed graph and must not mutate anything.

        Args:
            graph: Immutable dependency graph
            config: Package roots

        Returns:
            RuleResult (no violations if the scope is empty)
        """
        ...
