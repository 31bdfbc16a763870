"""Tests for infrastructure/config_loader.py."""

from pathlib import Path

import pytest

from cleanarch.domain.exceptions import ConfigurationError
from cleanarch.infrastructure.config_loader import load_config

ROOTS = """
enterprise-business = "shop.core.."
application-business = "shop.usecase.."
interface-adapters-controller = "shop.adapter.controller.."
interface-adapters-presenter = "shop.adapter.presenter.."
interface-adapters-infra = "shop.adapter.infra.."
communication-core-with-adapters = "shop.usecase.port.."
"""


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "pyproject.toml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadConfig:
    """Tests for load_config."""

    def test_tool_table(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            '[project]\nname = "shop"\n\n[tool.cleanarch]' + ROOTS
            + 'accepted-entity-dependencies = ["lombok.."]\n',
        )

        config = load_config(path)

        assert config.enterprise_business == "shop.core.."
        assert config.accepted_entity_dependencies == ("lombok..",)

    def test_top_level_table(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "[cleanarch]" + ROOTS)
        assert load_config(path).application_business == "shop.usecase.."

    def test_custom_table_name(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "[tool.arch]" + ROOTS)
        assert load_config(path, table="arch").communication_core_with_adapters == (
            "shop.usecase.port.."
        )

    def test_missing_table_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '[project]\nname = "shop"\n')
        with pytest.raises(ConfigurationError, match=r"no \[tool.cleanarch\] table"):
            load_config(path)

    def test_scalar_tool_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path, 'tool = "x"\n')
        with pytest.raises(ConfigurationError, match="'tool' must be a table"):
            load_config(path)

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "[tool.cleanarch\n")
        with pytest.raises(ConfigurationError, match="invalid TOML"):
            load_config(path)

    def test_invalid_value_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "[tool.cleanarch]" + ROOTS + 'main-project = "shop."\n')
        with pytest.raises(ConfigurationError):
            load_config(path)
