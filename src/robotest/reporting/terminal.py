"""Terminal reporter rendering run summaries."""
from __future__ import annotations

from typing import Callable

import click
from colorama import Fore, Style

from robotest.core.models import RunSummary, TestCaseOutcome


class TerminalReporter:
    """Human-readable reporter that writes through ``click.echo``."""

    def __init__(
        self,
        *,
        use_color: bool = True,
        verbose: bool = False,
        echo: Callable[..., None] = click.echo,
    ) -> None:
        self._use_color = use_color
        self._verbose = verbose
        self._echo = echo

    def on_case_result(self, outcome: TestCaseOutcome, index: int, total: int) -> None:
        if not self._verbose or outcome.passed:
            return
        actual = "allowed" if outcome.actual_result else "denied"
        line = f" (line {outcome.definition.line})" if outcome.definition.line else ""
        self._echo(
            f"{self._styled('FAIL', Fore.RED)} [{index}/{total}] {outcome.identifier()} "
            f"-> was {actual}{line}"
        )

    def on_complete(self, summary: RunSummary) -> None:
        failed_color = Fore.RED if summary.failed else Fore.GREEN
        self._echo(f"Test cases run: {summary.total}")
        self._echo(f"Passed tests: {self._styled(str(summary.passed), Fore.GREEN)}")
        self._echo(f"Failed tests: {self._styled(str(summary.failed), failed_color)}")
        self._echo(f"Elapsed time {summary.elapsed_ms:.2f}ms")

    def warn(self, message: str) -> None:
        self._echo(self._styled(f"warning: {message}", Fore.YELLOW), err=True)

    def _styled(self, text: str, color: str) -> str:
        if not self._use_color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"
