"""TOML configuration loader.

Reads the [tool.cleanarch] table of pyproject.toml (or any TOML file):

    [tool.cleanarch]
    enterprise-business = "com.shop.core.."
    application-business = "com.shop.usecase.."
    interface-adapters-controller = "com.shop.adapter.controller.."
    interface-adapters-presenter = "com.shop.adapter.presenter.."
    interface-adapters-infra = "com.shop.adapter.infra.."
    communication-core-with-adapters = "com.shop.usecase.port.."
    accepted-entity-dependencies = ["lombok.."]
"""

from __future__ import annotations

import tomllib
from pathlib import Path

from cleanarch.domain.exceptions.configuration import ConfigurationError
from cleanarch.domain.model.configuration import CleanArchitectureConfig

TOOL_TABLE = "cleanarch"


def load_config(path: Path, *, table: str = TOOL_TABLE) -> CleanArchitectureConfig:
    """Load configuration from a TOML file.

    Looks for [tool.<table>] first, then a top-level [<table>].

    Args:
        path: TOML file
        table: Table name

    Returns:
        Validated CleanArchitectureConfig

    Raises:
        FileNotFoundError: If path does not exist
        ConfigurationError: If the file is not TOML or the table is missing/invalid
    """
    try:
        with path.open("rb") as f:
            document = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(str(path), f"invalid TOML: {e}") from e

    tool = document.get("tool", {})
    if not isinstance(tool, dict):
        raise ConfigurationError(str(path), "'tool' must be a table")

    section = tool.get(table)
    if section is None:
        section = document.get(table)
    if not isinstance(section, dict):
        raise ConfigurationError(str(path), f"no [tool.{table}] table")

    return CleanArchitectureConfig.from_mapping(section)
