"""Reporting exports."""
from .junit import REPORT_SUFFIX, JUnitReporter, report_identifier
from .terminal import TerminalReporter

__all__ = [
    "REPORT_SUFFIX",
    "JUnitReporter",
    "TerminalReporter",
    "report_identifier",
]
