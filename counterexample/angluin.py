"""
Angluin's counterexample processing.

Every prefix of the counterexample becomes a state prefix. This is the
processing from the original L* paper; it can add many states per round.
"""

from typing import Dict, Iterator

from core.dfa import DFA
from core.events import StepEvent

from .base_processor import CounterexampleProcessor, CounterexampleStrategy


class AngluinProcessor(CounterexampleProcessor):
    """Add all prefixes of the counterexample to S, shortest first."""

    strategy = CounterexampleStrategy.ANGLUIN

    def process(self, learner, counterexample: str, hypothesis: DFA,
                access_strings: Dict[int, str]) -> Iterator[StepEvent]:
        table = learner.table
        for i in range(len(counterexample) + 1):
            prefix = counterexample[:i]
            if prefix in table.states:
                continue

            # Prefixes of a state are already rows, so this is usually a promotion
            if prefix in table.extensions:
                yield from learner.promote(prefix)
            else:
                yield from learner.add_state(prefix)
