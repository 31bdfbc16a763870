"""pytest fixtures for architecture testing.

User overrides clean_arch_config or clean_arch_graph in their conftest.py
when the ini options are not enough.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cleanarch.domain.model.configuration import CleanArchitectureConfig
from cleanarch.domain.model.graph import DependencyGraph
from cleanarch.infrastructure.config_loader import load_config
from cleanarch.infrastructure.graph_loader import load_graph
from cleanarch.presentation.api.facade import CleanArchitecture


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        String value of ini option
    """
    value = config.getini(name)
    if value:
        return str(value)
    return default


def _root_dir(request: pytest.FixtureRequest) -> Path:
    return Path(str(request.config.rootpath))


@pytest.fixture(scope="session")
def clean_arch_config(request: pytest.FixtureRequest) -> CleanArchitectureConfig:
    """Package roots of the checked project.

    Reads the [tool.cleanarch] table of clean_arch_config_file
    (default: pyproject.toml in the rootdir).

    Returns:
        CleanArchitectureConfig
    """
    config_file = _get_ini_value(request.config, "clean_arch_config_file", "pyproject.toml")
    path = _root_dir(request) / config_file

    if not path.exists():
        raise FileNotFoundError(
            f"clean_arch_config_file '{path}' does not exist. "
            f"Configure clean_arch_config_file or override the clean_arch_config fixture."
        )

    return load_config(path)


@pytest.fixture(scope="session")
def clean_arch_graph(request: pytest.FixtureRequest) -> DependencyGraph:
    """Dependency graph snapshot read from clean_arch_graph_file.

    Returns:
        DependencyGraph
    """
    graph_file = _get_ini_value(request.config, "clean_arch_graph_file", "")
    if not graph_file:
        raise FileNotFoundError(
            "clean_arch_graph_file is not configured. "
            "Set it in pytest.ini or pyproject.toml, or override the clean_arch_graph fixture."
        )

    return load_graph(_root_dir(request) / graph_file)


@pytest.fixture(scope="session")
def clean_arch(
    clean_arch_graph: DependencyGraph,
    clean_arch_config: CleanArchitectureConfig,
) -> CleanArchitecture:
    """Clean-architecture facade for assertions.

    Returns:
        CleanArchitecture bound to the session graph
    """
    return CleanArchitecture(clean_arch_graph, clean_arch_config)
