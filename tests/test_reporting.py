from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List

import pytest

from robotest.core import RunSummary, TestCaseDefinition, TestCaseOutcome
from robotest.core.errors import ReportIoError
from robotest.reporting import JUnitReporter, TerminalReporter, report_identifier


def _outcome(index: int, url: str, expected: bool, actual: bool) -> TestCaseOutcome:
    definition = TestCaseDefinition(user_agent="bot", url=url, expected_result=expected, line=index + 1)
    return TestCaseOutcome(index=index, definition=definition, actual_result=actual)


def test_report_identifier_strips_csv_extension() -> None:
    assert report_identifier("cases/suite1.csv") == "suite1"
    assert report_identifier(Path("/tmp/smoke.tests.csv")) == "smoke.tests"
    assert report_identifier("plain") == "plain"
    assert report_identifier("data.txt") == "data.txt"
    assert report_identifier("suite.CSV") == "suite.CSV"


def test_junit_reporter_writes_suite(tmp_path: Path) -> None:
    outcomes = [
        _outcome(0, "/public", True, True),
        _outcome(1, "/private", True, False),
    ]
    path = JUnitReporter(tmp_path).write(outcomes, "suite1")
    assert path == tmp_path / "suite1.robots-test-results.xml"
    root = ET.parse(path).getroot()
    assert root.tag == "testsuites"
    suites = root.findall("testsuite")
    assert len(suites) == 1
    suite = suites[0]
    assert suite.get("name") == "suite1"
    assert suite.get("tests") == "2"
    assert suite.get("failures") == "1"
    cases = suite.findall("testcase")
    assert [case.get("name") for case in cases] == [
        "Accessing URL: /public as bot should be allowed",
        "Accessing URL: /private as bot should be allowed",
    ]
    assert all(case.get("time") == "0.000" for case in cases)
    assert cases[0].find("failure") is None
    failure = cases[1].find("failure")
    assert failure is not None
    assert failure.get("type") == "assert_eq"
    assert failure.get("message") == "not equal"


def test_junit_reporter_empty_outcomes(tmp_path: Path) -> None:
    path = JUnitReporter(tmp_path).write([], "empty")
    suite = ET.parse(path).getroot().find("testsuite")
    assert suite is not None
    assert suite.get("tests") == "0"
    assert suite.findall("testcase") == []


def test_junit_reporter_defaults_to_working_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    path = JUnitReporter().write([_outcome(0, "/", False, False)], "cwd")
    assert (tmp_path / "cwd.robots-test-results.xml").exists()
    assert path.name == "cwd.robots-test-results.xml"


def test_junit_reporter_unwritable_target(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(ReportIoError):
        JUnitReporter(blocker).write([], "suite")


def test_terminal_reporter_summary_lines() -> None:
    lines: List[str] = []
    reporter = TerminalReporter(use_color=False, echo=lambda message, **_: lines.append(message))
    reporter.on_complete(RunSummary(total=3, passed=2, elapsed_s=0.0123))
    assert lines == [
        "Test cases run: 3",
        "Passed tests: 2",
        "Failed tests: 1",
        "Elapsed time 12.30ms",
    ]


def test_terminal_reporter_verbose_failures_only() -> None:
    lines: List[str] = []
    reporter = TerminalReporter(use_color=False, verbose=True, echo=lambda message, **_: lines.append(message))
    reporter.on_case_result(_outcome(0, "/ok", True, True), 1, 2)
    reporter.on_case_result(_outcome(1, "/bad", True, False), 2, 2)
    assert lines == ["FAIL [2/2] Accessing URL: /bad as bot should be allowed -> was denied (line 2)"]


def test_terminal_reporter_quiet_by_default() -> None:
    lines: List[str] = []
    reporter = TerminalReporter(use_color=False, echo=lambda message, **_: lines.append(message))
    reporter.on_case_result(_outcome(0, "/bad", True, False), 1, 1)
    assert lines == []
