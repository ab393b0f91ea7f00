"""Core dataclasses shared across robotest subsystems."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TestCaseDefinition:
    """One row of expected behaviour: an agent, a URL and the expected decision."""

    __test__ = False  # keep pytest from collecting this as a test class

    user_agent: str
    url: str
    expected_result: bool
    line: int = 0

    def label(self) -> str:
        return "allowed" if self.expected_result else "denied"


@dataclass(frozen=True)
class TestCaseOutcome:
    """Actual decision recorded against a single definition."""

    __test__ = False

    index: int
    definition: TestCaseDefinition
    actual_result: bool

    @property
    def user_agent(self) -> str:
        return self.definition.user_agent

    @property
    def url(self) -> str:
        return self.definition.url

    @property
    def expected_result(self) -> bool:
        return self.definition.expected_result

    @property
    def passed(self) -> bool:
        return self.actual_result == self.definition.expected_result

    def identifier(self) -> str:
        return (
            f"Accessing URL: {self.url} as {self.user_agent} "
            f"should be {self.definition.label()}"
        )


@dataclass(frozen=True)
class RunSummary:
    """Counts derived from a completed outcome sequence."""

    total: int
    passed: int
    elapsed_s: float = 0.0

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def success(self) -> bool:
        return self.failed == 0

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_s * 1000
