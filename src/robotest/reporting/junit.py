"""JUnit XML reporter emitting one test suite per run."""
from __future__ import annotations

import datetime as dt
import os
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Sequence, Union

from robotest.core.errors import ReportIoError
from robotest.core.models import TestCaseOutcome

REPORT_SUFFIX = ".robots-test-results.xml"
FAILURE_TYPE = "assert_eq"
FAILURE_MESSAGE = "not equal"


def report_identifier(cases_path: Union[str, Path]) -> str:
    """Suite name for a test-case file: its file name with ``.csv`` removed."""

    return Path(cases_path).name.replace(".csv", "")


class JUnitReporter:
    """Writes outcomes to ``{report_id}.robots-test-results.xml``."""

    def __init__(self, directory: Union[str, Path] = ".") -> None:
        self._directory = Path(directory)

    def path_for(self, report_id: str) -> Path:
        return self._directory / f"{report_id}{REPORT_SUFFIX}"

    def write(self, outcomes: Sequence[TestCaseOutcome], report_id: str) -> Path:
        path = self.path_for(report_id)
        tree = ET.ElementTree(build_document(outcomes, report_id))
        ET.indent(tree, space="  ")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("wb") as handle:
                tree.write(handle, encoding="utf-8", xml_declaration=True)
                handle.flush()
                os.fsync(handle.fileno())
        except OSError as exc:
            raise ReportIoError(path, str(exc)) from exc
        return path


def build_document(outcomes: Sequence[TestCaseOutcome], report_id: str) -> ET.Element:
    failures = sum(1 for outcome in outcomes if not outcome.passed)
    root = ET.Element("testsuites")
    suite = ET.SubElement(
        root,
        "testsuite",
        {
            "id": "0",
            "name": report_id,
            "package": f"testsuite/{report_id}",
            "tests": str(len(outcomes)),
            "errors": "0",
            "failures": str(failures),
            "hostname": "localhost",
            "timestamp": dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds"),
            "time": "0.000",
        },
    )
    for outcome in outcomes:
        case = ET.SubElement(suite, "testcase", {"name": outcome.identifier(), "time": "0.000"})
        if not outcome.passed:
            ET.SubElement(case, "failure", {"type": FAILURE_TYPE, "message": FAILURE_MESSAGE})
    return root
