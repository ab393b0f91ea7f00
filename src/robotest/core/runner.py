"""Evaluation engine mapping test-case definitions onto a decision port."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Callable, Optional, Sequence, Tuple

from .errors import DecisionFailedError
from .models import TestCaseDefinition, TestCaseOutcome

if TYPE_CHECKING:  # pragma: no cover
    from robotest.policy.port import DecisionPort


class Evaluator:
    """Evaluates test cases in parallel against a shared, read-only port.

    Every definition is evaluated independently and the resulting outcomes
    keep the order of the input sequence, so reports are reproducible no
    matter how the pool schedules the work.
    """

    def __init__(self, port: DecisionPort, *, workers: Optional[int] = None) -> None:
        if workers is not None and workers < 1:
            raise ValueError("workers must be a positive integer")
        self._port = port
        self._workers = workers

    def run(
        self,
        cases: Sequence[TestCaseDefinition],
        *,
        on_outcome: Optional[Callable[[TestCaseOutcome, int, int], None]] = None,
    ) -> Tuple[TestCaseOutcome, ...]:
        indexed = tuple(enumerate(cases))
        if self._workers == 1 or len(indexed) <= 1:
            outcomes = tuple(self._evaluate(item) for item in indexed)
        else:
            with ThreadPoolExecutor(max_workers=self._workers) as pool:
                outcomes = tuple(pool.map(self._evaluate, indexed))
        if on_outcome:
            total = len(outcomes)
            for position, outcome in enumerate(outcomes, start=1):
                on_outcome(outcome, position, total)
        return outcomes

    def _evaluate(self, item: Tuple[int, TestCaseDefinition]) -> TestCaseOutcome:
        index, definition = item
        try:
            actual = self._port.decide(definition.user_agent, definition.url)
        except Exception as exc:
            raise DecisionFailedError(index, definition, str(exc)) from exc
        return TestCaseOutcome(index=index, definition=definition, actual_result=bool(actual))
