"""Tests for reporters/plain_text.py."""

from io import StringIO

from cleanarch.application.reporters import PlainTextReporter
from cleanarch.domain.model.check_result import CheckResult
from cleanarch.domain.model.enums import RuleCategory
from cleanarch.domain.model.location import SourceLocation
from cleanarch.domain.model.rule_result import RuleResult
from cleanarch.domain.model.violation import ConfigurationWarning, Violation


def _failing_result() -> CheckResult:
    violation = Violation(
        rule_name="private_entity_constructor",
        unit_name="shop.core.Order",
        message="Entity shop.core.Order has public constructors, expected only private",
        location=SourceLocation("Order.java", 1),
        category=RuleCategory.SHAPE,
        suggestion="Make constructors private",
    )
    warning = ConfigurationWarning(
        "layers_are_respected", "layer 'x' matches no package of the graph"
    )
    return CheckResult(
        rule_results=(
            RuleResult("layers_are_respected", "Layers", warnings=(warning,)),
            RuleResult("private_entity_constructor", "Ctors", violations=(violation,)),
        )
    )


class TestPlainTextReporter:
    """Tests for PlainTextReporter."""

    def test_passed_result(self) -> None:
        output = StringIO()

        PlainTextReporter(output).report(CheckResult(rule_results=(RuleResult("r", "R"),)))

        text = output.getvalue()
        assert "Architecture Check Results" in text
        assert "Status: PASS" in text
        assert "r: ok" in text
        assert "Result: PASSED" in text
        assert "Violations (" not in text

    def test_failed_result(self) -> None:
        output = StringIO()

        PlainTextReporter(output).report(_failing_result())

        text = output.getvalue()
        assert "private_entity_constructor: 1 violation(s)" in text
        assert "1. [ERROR] private_entity_constructor" in text
        assert "Location: Order.java:1" in text
        assert "Suggestion: Make constructors private" in text
        assert "Configuration warnings (1):" in text
        assert "Result: FAILED" in text
