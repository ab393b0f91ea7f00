"""End-to-end harness: load, evaluate, then aggregate and report in parallel."""
from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from robotest.cases.loader import load_cases
from robotest.config import HarnessConfig
from robotest.core.errors import ConfigError, ReportError
from robotest.core.models import RunSummary, TestCaseOutcome
from robotest.core.runner import Evaluator
from robotest.core.summary import exit_code, summarize
from robotest.policy.custom import load_port
from robotest.policy.port import DecisionPort, RobotsPolicy
from robotest.reporting.junit import JUnitReporter, report_identifier
from robotest.reporting.terminal import TerminalReporter


@dataclass(frozen=True)
class HarnessResult:
    summary: RunSummary
    outcomes: Tuple[TestCaseOutcome, ...]
    report_path: Optional[Path] = None
    report_error: Optional[ReportError] = None

    @property
    def exit_code(self) -> int:
        if self.report_error is not None:
            return 1
        return exit_code(self.summary)


def build_port(config: HarnessConfig) -> DecisionPort:
    if config.decider:
        return load_port(config.decider)
    if config.robots_path is None:
        raise ConfigError("A robots.txt path or a decider is required")
    return RobotsPolicy.from_path(config.robots_path, agent=config.agent)


def run_harness(
    config: HarnessConfig,
    *,
    port: Optional[DecisionPort] = None,
    reporter: Optional[TerminalReporter] = None,
) -> HarnessResult:
    """Execute one stateless harness run; returns the result with its exit code.

    ``LoadError`` and ``PolicyConstructionError`` propagate before any case is
    evaluated. A ``ReportError`` propagates unless ``on_report_error`` is
    ``warn``, in which case it is recorded on the result.
    """
    start = time.perf_counter()
    if config.cases_path is None:
        raise ConfigError("A test-case file path is required")
    reporter = reporter or TerminalReporter()
    port = port if port is not None else build_port(config)
    cases = load_cases(config.cases_path, header=config.header)
    outcomes = Evaluator(port, workers=config.workers).run(cases, on_outcome=reporter.on_case_result)

    report_id = report_identifier(config.cases_path)
    with ThreadPoolExecutor(max_workers=2) as pool:
        report_future = (
            pool.submit(JUnitReporter(config.report_dir).write, outcomes, report_id)
            if config.generate_report
            else None
        )
        summary_future = pool.submit(summarize, outcomes)
        counts = summary_future.result()

    report_path: Optional[Path] = None
    report_error: Optional[ReportError] = None
    if report_future is not None:
        try:
            report_path = report_future.result()
        except ReportError as exc:
            if config.on_report_error != "warn":
                raise
            report_error = exc
            reporter.warn(str(exc))

    summary = RunSummary(
        total=counts.total,
        passed=counts.passed,
        elapsed_s=time.perf_counter() - start,
    )
    reporter.on_complete(summary)
    return HarnessResult(
        summary=summary,
        outcomes=outcomes,
        report_path=report_path,
        report_error=report_error,
    )
