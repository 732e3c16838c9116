"""
Maler-Pnueli counterexample processing.

Every suffix of the counterexample becomes a separator, so the set of state
prefixes stays prefix-closed and tables never become inconsistent through
counterexample processing alone.
"""

from typing import Dict, Iterator

from core.dfa import DFA
from core.events import StepEvent

from .base_processor import CounterexampleProcessor, CounterexampleStrategy


class MalerPnueliProcessor(CounterexampleProcessor):
    """Add all suffixes of the counterexample to E, longest first."""

    strategy = CounterexampleStrategy.MALER_PNUELI

    def process(self, learner, counterexample: str, hypothesis: DFA,
                access_strings: Dict[int, str]) -> Iterator[StepEvent]:
        for i in range(len(counterexample) + 1):
            suffix = counterexample[i:]
            if suffix in learner.table.separators:
                continue
            yield from learner.add_separator(suffix)
