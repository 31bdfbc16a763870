"""Plain text reporter: one section per concern, fixed-width rules."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from cleanarch.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from cleanarch.domain.model.check_result import CheckResult
    from cleanarch.domain.model.violation import ConfigurationWarning, Violation


class PlainTextReporter(BaseReporter):
    """Human-readable report: summary, per-rule status, warnings, violations.

    Writes to any TextIO (default: stdout), so CI logs and tests can capture it.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: CheckResult) -> None:
        """Write the report for one check run.

        Args:
            result: Complete check result
        """
        self._report_header()
        self._report_summary(result)

        if result.warnings:
            self._report_warnings(result.warnings)

        if result.violations:
            self._report_violations(result.violations)

        self._report_footer(result)

    def _write(self, text: str = "") -> None:
        """Print one line."""
        print(text, file=self._output)

    def _report_header(self) -> None:
        self._write("=" * 70)
        self._write("Architecture Check Results")
        self._write("=" * 70)

    def _report_summary(self, result: CheckResult) -> None:
        self._write()
        self._write("Summary:")
        self._write(f"  Units: {result.stats.units_analyzed}")
        self._write(f"  Edges: {result.stats.edges_analyzed}")
        self._write(f"  Rules: {result.stats.rules_run}")
        self._write(f"  Violations: {result.violation_count}")
        self._write(f"  Warnings: {len(result.warnings)}")
        self._write(f"  Status: {result.verdict.name}")

        for rule_result in result.rule_results:
            mark = "ok" if rule_result.passed else f"{len(rule_result.violations)} violation(s)"
            self._write(f"    {rule_result.rule_name}: {mark}")

    def _report_warnings(self, warnings: tuple[ConfigurationWarning, ...]) -> None:
        self._write()
        self._write(f"Configuration warnings ({len(warnings)}):")
        for warning in warnings:
            self._write(f"  - {warning}")

    def _report_violations(self, violations: tuple[Violation, ...]) -> None:
        self._write()
        self._write("-" * 70)
        self._write(f"Violations ({len(violations)}):")
        self._write("-" * 70)

        for i, violation in enumerate(violations, start=1):
            self._write()
            self._write(f"{i}. [{violation.severity.name}] {violation.rule_name}")
            self._write(f"   {violation.message}")
            self._write(f"   Unit: {violation.unit_name}")
            if violation.location is not None:
                self._write(f"   Location: {violation.location}")
            if violation.suggestion:
                self._write(f"   Suggestion: {violation.suggestion}")

    def _report_footer(self, result: CheckResult) -> None:
        self._write()
        self._write("=" * 70)
        status = "PASSED" if result.passed else "FAILED"
        self._write(f"Result: {status}")
        self._write("=" * 70)
