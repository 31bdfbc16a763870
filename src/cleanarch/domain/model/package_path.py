"""Package path value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class PackagePath:
    """Ordered sequence of package segments.

    Equality and ordering are segment-wise. The empty path is the root
    (default) package.

    Attributes:
        segments: Package segments, outermost first
    """

    segments: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for segment in self.segments:
            if not segment:
                raise ValueError(f"empty segment in package path {self.segments!r}")
            if "." in segment:
                raise ValueError(f"segment '{segment}' must not contain '.'")

    @classmethod
    def parse(cls, dotted: str) -> PackagePath:
        """Parse dotted package name ("a.b.c").

        Args:
            dotted: Package name, empty string for the root package

        Returns:
            PackagePath

        Raises:
            ValueError: If a segment is empty ("a..b", "a.")
        """
        if not dotted:
            return cls()
        return cls(tuple(dotted.split(".")))

    @property
    def is_root(self) -> bool:
        """True for the root (default) package."""
        return not self.segments

    @property
    def last(self) -> str | None:
        """Innermost segment, None for the root package."""
        return self.segments[-1] if self.segments else None

    def is_prefix_of(self, other: PackagePath) -> bool:
        """Check if this path is a segment-wise prefix of other (or equal)."""
        return other.segments[: len(self.segments)] == self.segments

    def strip_from_last(self, segment: str) -> PackagePath | None:
        """Cut the path before the last occurrence of segment.

        Example: app.order.request.v2 stripped from "request" -> app.order

        Returns:
            Remaining prefix, None if segment does not occur
        """
        for index in range(len(self.segments) - 1, -1, -1):
            if self.segments[index] == segment:
                return PackagePath(self.segments[:index])
        return None

    def __str__(self) -> str:
        """Format as dotted name."""
        return ".".join(self.segments)
