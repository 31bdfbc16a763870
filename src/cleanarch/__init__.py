"""cleanarch - clean-architecture conformance rules over a dependency graph."""

__version__ = "0.1.0"

from cleanarch.domain.model.check_result import CheckResult
from cleanarch.domain.model.configuration import CleanArchitectureConfig
from cleanarch.domain.model.graph import DependencyGraph
from cleanarch.presentation.api.facade import CleanArchitecture

__all__ = [
    "CheckResult",
    "CleanArchitecture",
    "CleanArchitectureConfig",
    "DependencyGraph",
    "__version__",
]
