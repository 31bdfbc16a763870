"""Dependency graph exceptions."""

from cleanarch.domain.exceptions.base import CleanArchError


class GraphConsistencyError(CleanArchError):
    """Dependency graph snapshot cannot be built.

    Raised while constructing or loading a graph, never during rule
    evaluation. Unknown edge targets are not an error: rules skip them.

    Attributes:
        reason: What is inconsistent
        unit_name: Unit involved, if known
    """

    def __init__(self, reason: str, unit_name: str | None = None) -> None:
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        self.unit_name = unit_name
        where = f" (unit '{unit_name}')" if unit_name else ""
        super().__init__(f"Inconsistent dependency graph{where}: {reason}")
