"""Core models and helpers exposed at the package level."""
from .errors import (
    DecisionFailedError,
    EvaluationError,
    LoadError,
    PolicyConstructionError,
    ReportError,
    RobotestError,
)
from .models import RunSummary, TestCaseDefinition, TestCaseOutcome
from .runner import Evaluator
from .summary import exit_code, summarize

__all__ = [
    "DecisionFailedError",
    "EvaluationError",
    "Evaluator",
    "LoadError",
    "PolicyConstructionError",
    "ReportError",
    "RobotestError",
    "RunSummary",
    "TestCaseDefinition",
    "TestCaseOutcome",
    "exit_code",
    "summarize",
]
