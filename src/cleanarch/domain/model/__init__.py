"""Domain model: dependency graph snapshot and check results.

Pattern-aware definitions (architecture, configuration) are imported from
their own modules.
"""

from cleanarch.domain.model.check_result import CheckResult
from cleanarch.domain.model.check_stats import CheckStats
from cleanarch.domain.model.enums import (
    ConstructorVisibility,
    RuleCategory,
    Severity,
    UnitKind,
    Verdict,
)
from cleanarch.domain.model.graph import DependencyGraph
from cleanarch.domain.model.location import SourceLocation
from cleanarch.domain.model.package_path import PackagePath
from cleanarch.domain.model.rule_result import RuleResult
from cleanarch.domain.model.unit import Edge, Unit
from cleanarch.domain.model.violation import ConfigurationWarning, Violation

__all__ = [
    # Enums
    "UnitKind",
    "ConstructorVisibility",
    "Severity",
    "RuleCategory",
    "Verdict",
    # Graph
    "PackagePath",
    "SourceLocation",
    "Unit",
    "Edge",
    "DependencyGraph",
    # Results
    "Violation",
    "ConfigurationWarning",
    "RuleResult",
    "CheckResult",
    "CheckStats",
]
