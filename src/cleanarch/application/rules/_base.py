"""Base rule class for architecture rules.

Provides default implementation of RuleProtocol.
Concrete rules inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from cleanarch.domain.model.enums import Severity
from cleanarch.domain.model.violation import Violation

if TYPE_CHECKING:
    from cleanarch.domain.model.configuration import CleanArchitectureConfig
    from cleanarch.domain.model.enums import RuleCategory
    from cleanarch.domain.model.graph import DependencyGraph
    from cleanarch.domain.model.location import SourceLocation
    from cleanarch.domain.model.rule_result import RuleResult
    from cleanarch.domain.model.unit import Edge


class BaseRule(ABC):
    """Base class for rules implementing RuleProtocol.

    Concrete rules must:
    1. Set `name`, `description` and `category` class attributes
       (or instance attributes for parametrised rules)
    2. Implement `evaluate()`
    """

    name: str
    description: str
    category: RuleCategory

    @abstractmethod
    def evaluate(
        self,
        graph: DependencyGraph,
        config: CleanArchitectureConfig,
    ) -> RuleResult:
        """Evaluate rule and return its result.

        Args:
            graph: Immutable dependency graph
            config: Package roots

        Returns:
            RuleResult with violations if any
        """

    def violation(
        self,
        unit_name: str,
        message: str,
        location: SourceLocation | None,
        *,
        severity: Severity = Severity.ERROR,
        category: RuleCategory | None = None,
        suggestion: str | None = None,
    ) -> Violation:
        """Create a violation attributed to this rule."""
        return Violation(
            rule_name=self.name,
            unit_name=unit_name,
            message=message,
            location=location,
            category=category or self.category,
            severity=severity,
            suggestion=suggestion,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


def is_platform_edge(edge: Edge, config: CleanArchitectureConfig) -> bool:
    """True if the edge targets the language platform/runtime.

    Either the graph flagged the edge as builtin or the target package
    matches one of the configured platform packages.
    """
    return edge.is_builtin or any(p.match(edge.target_package) for p in config.platform)
