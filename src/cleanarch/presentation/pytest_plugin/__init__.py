"""pytest plugin for cleanarch.

Provides fixtures for architecture testing:
    clean_arch_config: Package roots (override in conftest.py)
    clean_arch_graph: Dependency graph snapshot (override in conftest.py)
    clean_arch: CleanArchitecture facade

Configuration (pytest.ini or pyproject.toml):
    clean_arch_graph_file: JSON graph snapshot, relative to rootdir
    clean_arch_config_file: TOML file with [tool.cleanarch] (default: pyproject.toml)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from cleanarch.presentation.pytest_plugin.fixtures import (
    clean_arch,
    clean_arch_config,
    clean_arch_graph,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "clean_arch",
    "clean_arch_config",
    "clean_arch_graph",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "clean_arch_graph_file",
        "JSON dependency graph snapshot checked by the clean_arch fixture",
        default="",
    )
    parser.addini(
        "clean_arch_config_file",
        "TOML file holding the [tool.cleanarch] table",
        default="pyproject.toml",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    # Add marker for architecture tests
    config.addinivalue_line(
        "markers",
        "clean_arch: mark test as architecture test",
    )
