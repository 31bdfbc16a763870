"""Domain exceptions."""

from cleanarch.domain.exceptions.base import CleanArchError
from cleanarch.domain.exceptions.configuration import ConfigurationError, PatternError
from cleanarch.domain.exceptions.graph import GraphConsistencyError
from cleanarch.domain.exceptions.violation import ArchitectureViolationError

__all__ = [
    "CleanArchError",
    "ConfigurationError",
    "PatternError",
    "GraphConsistencyError",
    "ArchitectureViolationError",
]
