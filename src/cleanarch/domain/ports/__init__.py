"""Domain ports: extension contracts."""

from cleanarch.domain.ports.reporter import ReporterProtocol
from cleanarch.domain.ports.rule import RuleProtocol

__all__ = ["ReporterProtocol", "RuleProtocol"]
