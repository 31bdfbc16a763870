"""Tests for reporters/json_reporter.py."""

import json
from io import StringIO

from cleanarch.application.reporters import JSONReporter
from cleanarch.domain.model.check_result import CheckResult
from cleanarch.domain.model.enums import RuleCategory, Severity
from cleanarch.domain.model.location import SourceLocation
from cleanarch.domain.model.rule_result import RuleResult
from cleanarch.domain.model.violation import Violation


class TestJSONReporter:
    """Tests for JSONReporter."""

    def test_outputs_valid_json(self) -> None:
        output = StringIO()

        JSONReporter(output).report(CheckResult.empty())

        data = json.loads(output.getvalue())
        assert data["verdict"] == "PASS"
        assert data["passed"] is True
        assert data["violations"] == []

    def test_violation_fields(self) -> None:
        with_location = Violation(
            "r", "a.A", "broken", SourceLocation("A.java", 7), RuleCategory.NAMING
        )
        without_location = Violation(
            "r", "core", "shadowed", None, RuleCategory.CONFIGURATION, Severity.WARNING
        )
        result = CheckResult(
            rule_results=(RuleResult("r", "R", violations=(with_location, without_location)),)
        )

        data = JSONReporter().result_to_dict(result)

        first, second = data["violations"]
        assert first["source_location"] == {"file": "A.java", "line": 7}
        assert first["category"] == "NAMING"
        assert first["severity"] == "ERROR"
        assert second["source_location"] is None
        assert second["severity"] == "WARNING"
        assert data["summary"]["failed_rules"] == ["r"]
        assert data["rules"][0]["violation_count"] == 2

    def test_compact(self) -> None:
        output = StringIO()
        JSONReporter(output, indent=None).report(CheckResult.empty())
        assert output.getvalue().count("\n") == 1
