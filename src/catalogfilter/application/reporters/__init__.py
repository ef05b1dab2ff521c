"""Reporters for catalog page state.

ConsoleReporter uses rich; JSONReporter uses stdlib only.
"""

from catalogfilter.application.reporters._base import BaseReporter
from catalogfilter.application.reporters.console import ConsoleReporter
from catalogfilter.application.reporters.json_reporter import JSONReporter

__all__ = [
    "BaseReporter",
    "ConsoleReporter",
    "JSONReporter",
]
