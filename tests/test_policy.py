from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from robotest.core.errors import PolicyConstructionError
from robotest.policy import DEFAULT_AGENT, RobotsPolicy, load_port


@pytest.mark.parametrize(
    "robots_txt, user_agent, url, expected",
    [
        ("", "bot", "/x", True),
        ("User-agent: *\nDisallow: /", "bot", "/x", False),
        ("User-agent: *\nDisallow: /private", "bot", "/private/page", False),
        ("User-agent: *\nDisallow: /private", "bot", "https://example.com/public", True),
        ("User-agent: badbot\nDisallow: /", "goodbot", "/anything", True),
        ("User-agent: badbot\nDisallow: /", "badbot", "/anything", False),
    ],
)
def test_robots_policy_decisions(robots_txt: str, user_agent: str, url: str, expected: bool) -> None:
    assert RobotsPolicy(robots_txt).decide(user_agent, url) is expected


def test_blank_agent_falls_back_to_identifying_agent() -> None:
    policy = RobotsPolicy("User-agent: googlebot\nDisallow: /g\n")
    assert policy.agent == DEFAULT_AGENT
    assert policy.decide("", "/g") is False
    assert policy.decide("otherbot", "/g") is True


def test_from_path_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "robots.txt"
    path.write_text("User-agent: *\nDisallow: /tmp\n", encoding="utf-8")
    policy = RobotsPolicy.from_path(path, agent="mybot")
    assert policy.agent == "mybot"
    assert policy.decide("bot", "/tmp/x") is False


def test_from_path_missing_file(tmp_path: Path) -> None:
    with pytest.raises(PolicyConstructionError):
        RobotsPolicy.from_path(tmp_path / "missing.txt")


def test_load_port_from_source(tmp_path: Path) -> None:
    source = tmp_path / "decider.py"
    source.write_text(
        textwrap.dedent(
            """
            def decide(user_agent, url):
                return not url.startswith("/admin")
            """
        ),
        encoding="utf-8",
    )
    port = load_port(f"{source}:decide")
    assert port.decide("bot", "/home") is True
    assert port.decide("bot", "/admin/panel") is False


def test_load_port_relative_to_base(tmp_path: Path) -> None:
    (tmp_path / "decider.py").write_text("def allow(user_agent, url):\n    return 1\n", encoding="utf-8")
    port = load_port("decider.py:allow", base=tmp_path)
    assert port.decide("bot", "/") is True


@pytest.mark.parametrize(
    "content, spec",
    [
        (None, "missing.py:decide"),
        ("x = 1\n", "decider.py:decide"),
        ("decide = 42\n", "decider.py:decide"),
        ("raise RuntimeError('broken')\n", "decider.py:decide"),
        ("def decide(a, b):\n    return True\n", "decider.py"),
    ],
)
def test_load_port_errors(tmp_path: Path, content, spec: str) -> None:
    if content is not None:
        (tmp_path / "decider.py").write_text(content, encoding="utf-8")
    with pytest.raises(PolicyConstructionError):
        load_port(spec, base=tmp_path)
