import textwrap
from pathlib import Path

import pytest


ROBOTS_TXT = """
User-agent: *
Disallow: /private

User-agent: badbot
Disallow: /
"""


def write_text(path: Path, content: str) -> Path:
    path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
    return path


@pytest.fixture
def robots_file(tmp_path: Path) -> Path:
    return write_text(tmp_path / "robots.txt", ROBOTS_TXT)


@pytest.fixture
def cases_file(tmp_path: Path) -> Path:
    return write_text(
        tmp_path / "suite1.csv",
        """
        bot,/public,true
        bot,/private,false
        badbot,/public,no
        """,
    )
