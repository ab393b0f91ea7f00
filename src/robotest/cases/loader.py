"""CSV loader producing test-case definitions."""
from __future__ import annotations

import csv
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from robotest.core.errors import CsvSyntaxError, InvalidBooleanError, LoadIoError, MalformedRowError
from robotest.core.models import TestCaseDefinition

from .booleans import parse_lenient_bool

HEADER_MODES = ("auto", "always", "never")
# Column names recognised in the third cell of a header row.
HEADER_NAMES = frozenset({"expected_result", "expected-result", "expected", "allowed", "result"})


def load_cases(path: Union[str, Path], *, header: str = "auto") -> Tuple[TestCaseDefinition, ...]:
    """Load ``user-agent,url,expected`` rows from a CSV file.

    ``header`` controls the first row: ``always`` drops it, ``never`` keeps it
    as data and ``auto`` drops it only when its third cell names the
    expected-result column.
    """
    if header not in HEADER_MODES:
        raise ValueError(f"header must be one of {', '.join(HEADER_MODES)}")
    cases_path = Path(path)
    try:
        with cases_path.open(newline="", encoding="utf-8") as handle:
            rows = _read_rows(handle)
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadIoError(cases_path, str(exc)) from exc

    definitions: List[TestCaseDefinition] = []
    for position, (line, row) in enumerate(rows):
        if position == 0 and _is_header(row, header):
            continue
        definitions.append(_parse_row(line, row))
    return tuple(definitions)


def _read_rows(handle) -> List[Tuple[int, List[str]]]:
    reader = csv.reader(handle)
    rows: List[Tuple[int, List[str]]] = []
    while True:
        try:
            row = next(reader)
        except StopIteration:
            break
        except csv.Error as exc:
            raise CsvSyntaxError(reader.line_num, str(exc)) from exc
        if not row or all(not field.strip() for field in row):
            continue
        rows.append((reader.line_num, row))
    return rows


def _is_header(row: Sequence[str], mode: str) -> bool:
    if mode == "always":
        return True
    if mode == "never":
        return False
    return len(row) == 3 and row[2].strip().lower() in HEADER_NAMES


def _parse_row(line: int, row: Sequence[str]) -> TestCaseDefinition:
    if len(row) != 3:
        raise MalformedRowError(line, len(row))
    user_agent, url, raw_expected = row
    expected = parse_lenient_bool(raw_expected)
    if expected is None:
        raise InvalidBooleanError(line, raw_expected)
    return TestCaseDefinition(
        user_agent=user_agent.strip(),
        url=url.strip(),
        expected_result=expected,
        line=line,
    )
