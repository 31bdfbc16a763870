"""Check statistics for architecture analysis results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CheckStats:
    """Statistics from architecture check.

    Attributes:
        units_analyzed: Number of units in the snapshot
        edges_analyzed: Number of edges in the snapshot
        rules_run: Number of rules evaluated
        analysis_time_ms: Total evaluation time in milliseconds
    """

    units_analyzed: int
    edges_analyzed: int
    rules_run: int
    analysis_time_ms: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.units_analyzed < 0:
            raise ValueError(f"units_analyzed must be >= 0, got {self.units_analyzed}")
        if self.edges_analyzed < 0:
            raise ValueError(f"edges_analyzed must be >= 0, got {self.edges_analyzed}")
        if self.rules_run < 0:
            raise ValueError(f"rules_run must be >= 0, got {self.rules_run}")
        if self.analysis_time_ms < 0:
            raise ValueError(f"analysis_time_ms must be >= 0, got {self.analysis_time_ms}")

    @classmethod
    def empty(cls) -> CheckStats:
        """Create empty check stats."""
        return cls(units_analyzed=0, edges_analyzed=0, rules_run=0, analysis_time_ms=0.0)
