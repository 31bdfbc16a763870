"""Source code location value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a dependency or declaration in source code.

    Attributes:
        file: Source file (or other locator such as a class file name)
        line: Line number (1-based), 0 when the line is unknown
    """

    file: str
    line: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.file:
            raise ValueError("file must not be empty")
        if self.line < 0:
            raise ValueError(f"line must be >= 0, got {self.line}")

    def __str__(self) -> str:
        """Format as file:line."""
        if self.line == 0:
            return self.file
        return f"{self.file}:{self.line}"
