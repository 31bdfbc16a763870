"""Console reporter: CheckResult → rich tables."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cleanarch.application.reporters._base import BaseReporter
from cleanarch.domain.model.enums import Severity

if TYPE_CHECKING:
    from cleanarch.domain.model.check_result import CheckResult


class ConsoleReporter(BaseReporter):
    """Console reporter: rule summary table plus violations grouped by rule.

    Writes to the given rich Console (default: a new stdout console).
    """

    def __init__(self, console: Console | None = None, *, show_warnings: bool = True) -> None:
        """Initialize reporter.

        Args:
            console: Rich console to print to
            show_warnings: Render configuration warnings section
        """
        self._console = console if console is not None else Console()
        self._show_warnings = show_warnings

    def report(self, result: CheckResult) -> None:
        """Render check result."""
        console = self._console

        console.print()
        console.rule("[bold]ARCHITECTURE CHECK[/bold]")
        console.print()

        summary = Table(title="Rules")
        summary.add_column("Rule")
        summary.add_column("Scope", justify="right")
        summary.add_column("Violations", justify="right")
        summary.add_column("Status")
        for rule_result in result.rule_results:
            status = "[green]PASS[/green]" if rule_result.passed else "[red]FAIL[/red]"
            summary.add_row(
                rule_result.rule_name,
                str(rule_result.checked_count),
                str(len(rule_result.violations)),
                status,
            )
        console.print(summary)

        for rule_result in result.rule_results:
            if rule_result.passed:
                continue
            console.print()
            console.print(
                f"[bold]{rule_result.rule_name}[/bold] "
                f"[dim]{escape(rule_result.description)}[/dim]"
            )
            for violation in rule_result.violations:
                color = "red" if violation.severity == Severity.ERROR else "yellow"
                console.print(
                    f"  [{color}]✗[/{color}] {escape(violation.message)}", highlight=False
                )

        if self._show_warnings and result.warnings:
            console.print()
            console.print(
                f"[bold yellow]CONFIGURATION WARNINGS[/bold yellow] ({len(result.warnings)})"
            )
            for warning in result.warnings:
                console.print(f"  {escape(str(warning))}", highlight=False)

        console.print()
        verdict_color = "green" if result.passed else "red"
        console.print(
            f"[bold {verdict_color}]{result.verdict.name}[/bold {verdict_color}] "
            f"{result.violation_count} violation(s), "
            f"{result.stats.units_analyzed} units, {result.stats.edges_analyzed} edges"
        )
