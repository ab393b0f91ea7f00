"""Reduction of an outcome sequence into run counts."""
from __future__ import annotations

from typing import Sequence

from .models import RunSummary, TestCaseOutcome


def summarize(outcomes: Sequence[TestCaseOutcome], elapsed_s: float = 0.0) -> RunSummary:
    total = len(outcomes)
    passed = sum(1 for outcome in outcomes if outcome.passed)
    return RunSummary(total=total, passed=passed, elapsed_s=elapsed_s)


def exit_code(summary: RunSummary) -> int:
    """Process exit status for a finished run (0 success, 1 failures)."""

    return 0 if summary.success else 1
