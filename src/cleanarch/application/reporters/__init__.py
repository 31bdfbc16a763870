"""Reporters for architecture check results.

PlainTextReporter and JSONReporter use stdlib only.
ConsoleReporter renders rich tables.
"""

from cleanarch.application.reporters._base import BaseReporter
from cleanarch.application.reporters.console import ConsoleReporter
from cleanarch.application.reporters.json_reporter import JSONReporter
from cleanarch.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "PlainTextReporter",
    "JSONReporter",
    "ConsoleReporter",
]
