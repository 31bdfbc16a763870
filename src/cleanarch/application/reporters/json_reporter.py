"""JSON reporter: CheckResult -> one JSON document per run."""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from cleanarch.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from cleanarch.domain.model.check_result import CheckResult
    from cleanarch.domain.model.violation import Violation


class JSONReporter(BaseReporter):
    """Machine-readable report.

    Keys: verdict, passed, summary, rules, violations, warnings, stats.
    A violation without location has source_location null.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: CheckResult) -> None:
        """Dump the check result as a JSON document.

        Args:
            result: Complete check result
        """
        data = self.result_to_dict(result)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def result_to_dict(self, result: CheckResult) -> dict[str, object]:
        """Convert CheckResult to JSON-serializable dict."""
        return {
            "verdict": result.verdict.name,
            "passed": result.passed,
            "summary": {
                "violation_count": result.violation_count,
                "warning_count": len(result.warnings),
                "failed_rules": list(result.failed_rules),
            },
            "rules": [
                {
                    "name": r.rule_name,
                    "description": r.description,
                    "passed": r.passed,
                    "checked_count": r.checked_count,
                    "violation_count": len(r.violations),
                }
                for r in result.rule_results
            ],
            "violations": [self._violation_to_dict(v) for v in result.violations],
            "warnings": [
                {"rule_name": w.rule_name, "message": w.message, "directive": w.directive}
                for w in result.warnings
            ],
            "stats": {
                "units_analyzed": result.stats.units_analyzed,
                "edges_analyzed": result.stats.edges_analyzed,
                "rules_run": result.stats.rules_run,
                "analysis_time_ms": result.stats.analysis_time_ms,
            },
        }

    def _violation_to_dict(self, violation: Violation) -> dict[str, object]:
        location = violation.location
        return {
            "rule_name": violation.rule_name,
            "unit_name": violation.unit_name,
            "message": violation.message,
            "severity": violation.severity.name,
            "category": violation.category.name,
            "suggestion": violation.suggestion,
            "source_location": (
                None if location is None else {"file": location.file, "line": location.line}
            ),
        }
