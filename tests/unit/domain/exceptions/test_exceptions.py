"""Tests for domain exceptions."""

import pytest

from cleanarch.domain.exceptions import (
    ArchitectureViolationError,
    CleanArchError,
    ConfigurationError,
    GraphConsistencyError,
    PatternError,
)
from cleanarch.domain.model.enums import RuleCategory
from cleanarch.domain.model.violation import Violation


class TestHierarchy:
    """All errors derive from CleanArchError."""

    @pytest.mark.parametrize(
        "exc_type",
        [ConfigurationError, PatternError, GraphConsistencyError, ArchitectureViolationError],
    )
    def test_subclass(self, exc_type: type[Exception]) -> None:
        assert issubclass(exc_type, CleanArchError)

    def test_pattern_error_is_configuration_error(self) -> None:
        assert issubclass(PatternError, ConfigurationError)


class TestConfigurationError:
    """Tests for ConfigurationError and PatternError."""

    def test_message(self) -> None:
        error = ConfigurationError("layer 'core'", "no patterns")
        assert str(error) == "Invalid configuration 'layer 'core'': no patterns"
        assert error.subject == "layer 'core'"

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason must not be empty"):
            ConfigurationError("x", "")

    def test_pattern_error_keeps_pattern(self) -> None:
        error = PatternError("a.", "empty segment")
        assert error.pattern == "a."
        assert "'a.'" in str(error)


class TestGraphConsistencyError:
    """Tests for GraphConsistencyError."""

    def test_message_with_unit(self) -> None:
        error = GraphConsistencyError("duplicate unit name", "a.A")
        assert str(error) == "Inconsistent dependency graph (unit 'a.A'): duplicate unit name"

    def test_message_without_unit(self) -> None:
        assert str(GraphConsistencyError("bad")) == "Inconsistent dependency graph: bad"


class TestArchitectureViolationError:
    """Tests for ArchitectureViolationError."""

    def test_message_lists_violations(self) -> None:
        violation = Violation("r", "a.A", "broken", None, RuleCategory.NAMING)

        error = ArchitectureViolationError((violation,))

        assert str(error).startswith("Found 1 architecture violation(s):")
        assert "broken" in str(error)
        assert error.violations == (violation,)

    def test_requires_violations(self) -> None:
        with pytest.raises(ValueError, match="at least one violation"):
            ArchitectureViolationError(())
