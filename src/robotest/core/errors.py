"""Exception hierarchy raised by the harness pipeline."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from .models import TestCaseDefinition


class RobotestError(Exception):
    """Base class for every fatal harness error."""


class LoadError(RobotestError):
    """The test-case file could not be turned into definitions."""


class LoadIoError(LoadError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"unable to read test cases from {path}: {reason}")
        self.path = path


class MalformedRowError(LoadError):
    def __init__(self, line: int, fields: int) -> None:
        super().__init__(f"line {line}: expected 3 fields, found {fields}")
        self.line = line
        self.fields = fields


class InvalidBooleanError(LoadError):
    def __init__(self, line: int, token: str) -> None:
        super().__init__(f"line {line}: '{token}' is not a recognised boolean")
        self.line = line
        self.token = token


class CsvSyntaxError(LoadError):
    def __init__(self, line: int, reason: str) -> None:
        super().__init__(f"line {line}: unparseable CSV: {reason}")
        self.line = line


class PolicyConstructionError(RobotestError):
    """The decision port could not be built."""


class EvaluationError(RobotestError):
    """A test case could not be evaluated."""


class DecisionFailedError(EvaluationError):
    def __init__(
        self,
        case_index: int,
        definition: Optional[TestCaseDefinition] = None,
        reason: str = "",
    ) -> None:
        where = f"case {case_index}"
        if definition is not None:
            where += f" ({definition.user_agent} {definition.url})"
        message = f"decision failed for {where}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.case_index = case_index
        self.definition = definition


class ReportError(RobotestError):
    """The structured report could not be produced."""


class ReportIoError(ReportError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write test report to {path}: {reason}")
        self.path = path


class ConfigError(RobotestError, ValueError):
    """Harness configuration is invalid."""
