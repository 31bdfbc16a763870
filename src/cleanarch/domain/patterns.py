"""Package pattern matching.

AspectJ-style wildcards over package segments.

Syntax:
    a.b      literal segments, matches exactly a.b
    ..       zero or more arbitrary segments
    *        exactly one arbitrary segment
    ab*      one segment starting with "ab" (fnmatch within a segment)

Examples:
    ..request..   any package with a "request" segment (request, a.request, a.request.b)
    app..order    app.order, app.x.order, app.x.y.order
    java..        java and everything below it

Matching runs a small non-deterministic state machine over the path
segments instead of translating the pattern to a regex.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from fnmatch import fnmatchcase
from functools import lru_cache

from cleanarch.domain.exceptions.configuration import PatternError
from cleanarch.domain.model.package_path import PackagePath

ANY_DEPTH = ".."
"""Token for zero or more arbitrary segments."""


@dataclass(frozen=True, slots=True)
class PackagePattern:
    """Compiled package pattern.

    Attributes:
        original: Pattern string as written
        tokens: Segment tokens, ANY_DEPTH for the depth wildcard
    """

    original: str
    tokens: tuple[str, ...]

    def match(self, path: PackagePath) -> bool:
        """Check if the whole path matches the pattern.

        Args:
            path: Package path to test

        Returns:
            True if the pattern accepts the path
        """
        tokens = self.tokens
        final = len(tokens)
        states = self._closure({0})

        for segment in path.segments:
            advanced: set[int] = set()
            for state in states:
                if state == final:
                    continue
                token = tokens[state]
                if token == ANY_DEPTH:
                    advanced.add(state)
                elif fnmatchcase(segment, token):
                    advanced.add(state + 1)
            if not advanced:
                return False
            states = self._closure(advanced)

        return final in states

    def _closure(self, states: set[int]) -> frozenset[int]:
        """Add states reachable by letting ANY_DEPTH match nothing."""
        reachable = set(states)
        pending = list(states)
        while pending:
            state = pending.pop()
            if state < len(self.tokens) and self.tokens[state] == ANY_DEPTH:
                nxt = state + 1
                if nxt not in reachable:
                    reachable.add(nxt)
                    pending.append(nxt)
        return frozenset(reachable)

    def __str__(self) -> str:
        """Return original pattern string."""
        return self.original


@lru_cache(maxsize=1024)
def compile_pattern(pattern: str) -> PackagePattern:
    """Compile pattern string into segment tokens.

    FAIL-FIRST: raises PatternError for invalid patterns.

    Args:
        pattern: Pattern string

    Returns:
        PackagePattern

    Raises:
        PatternError: If pattern is empty or has an empty segment
    """
    if not pattern:
        raise PatternError(pattern, "pattern must not be empty")

    tokens: list[str] = []
    for index, part in enumerate(pattern.split(ANY_DEPTH)):
        if index > 0 and (not tokens or tokens[-1] != ANY_DEPTH):
            tokens.append(ANY_DEPTH)
        if not part:
            continue
        for segment in part.split("."):
            if not segment:
                raise PatternError(pattern, "empty segment (stray '.')")
            tokens.append(segment)

    return PackagePattern(original=pattern, tokens=tuple(tokens))


def _as_path(path: PackagePath | str) -> PackagePath:
    return path if isinstance(path, PackagePath) else PackagePath.parse(path)


def _as_pattern(pattern: PackagePattern | str) -> PackagePattern:
    return pattern if isinstance(pattern, PackagePattern) else compile_pattern(pattern)


def matches(pattern: PackagePattern | str, path: PackagePath | str) -> bool:
    """Check if package path matches pattern.

    Args:
        pattern: Pattern string or compiled pattern
        path: Package path or dotted name

    Returns:
        True if path matches
    """
    return _as_pattern(pattern).match(_as_path(path))


def is_prefix_of(prefix: PackagePath | str, path: PackagePath | str) -> bool:
    """Check if prefix is a segment-wise prefix of path.

    "app.order" is a prefix of "app.order" and "app.order.request",
    but not of "app.orderline".
    """
    return _as_path(prefix).is_prefix_of(_as_path(path))


def resides_in(
    path: PackagePath | str,
    patterns: Iterable[PackagePattern | str],
) -> bool:
    """Check if path matches at least one pattern.

    An empty pattern set never matches.
    """
    resolved = _as_path(path)
    return any(_as_pattern(p).match(resolved) for p in patterns)


def compile_all(patterns: Iterable[str]) -> tuple[PackagePattern, ...]:
    """Compile several patterns, keeping their order."""
    return tuple(compile_pattern(p) for p in patterns)
