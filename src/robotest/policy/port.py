"""robots.txt decision port built on ``urllib.robotparser``."""
from __future__ import annotations

from pathlib import Path
from typing import Protocol, Union
from urllib.robotparser import RobotFileParser

from robotest.core.errors import PolicyConstructionError

DEFAULT_AGENT = "googlebot"


class DecisionPort(Protocol):
    """Anything able to answer "may ``user_agent`` fetch ``url``?"."""

    def decide(self, user_agent: str, url: str) -> bool:  # pragma: no cover - interface
        ...


class RobotsPolicy:
    """Parsed robots.txt policy; read-only once constructed."""

    def __init__(self, content: str, agent: str = DEFAULT_AGENT) -> None:
        self.agent = agent
        self._parser = RobotFileParser()
        self._parser.parse(content.splitlines())

    @classmethod
    def from_path(cls, path: Union[str, Path], agent: str = DEFAULT_AGENT) -> "RobotsPolicy":
        policy_path = Path(path)
        try:
            content = policy_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PolicyConstructionError(f"Unable to read robots.txt file {policy_path}: {exc}") from exc
        return cls(content, agent=agent)

    def decide(self, user_agent: str, url: str) -> bool:
        return self._parser.can_fetch(user_agent.strip() or self.agent, url)
