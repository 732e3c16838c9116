"""
Rivest-Schapire counterexample processing.

Binary search over split points i of the counterexample w. For each i the
hypothesis state reached on w[:i] is replaced by its access string u, and
MQ(u·w[i:]) is compared with MQ(w). At i = 0 the two agree and at i = |w|
they cannot (w is a counterexample), so some adjacent pair (low, high)
flips; w[high:] then separates two rows the table considers equal.

Uses O(log |w|) membership queries and adds exactly one separator per round.
"""

import logging
from typing import Dict, Iterator

from core.dfa import DFA
from core.events import StepEvent

from .base_processor import CounterexampleProcessor, CounterexampleStrategy

logger = logging.getLogger(__name__)


class RivestSchapireProcessor(CounterexampleProcessor):
    """Find a single distinguishing suffix by binary search."""

    strategy = CounterexampleStrategy.RIVEST_SCHAPIRE

    def find_suffix(self, learner, counterexample: str, hypothesis: DFA,
                    access_strings: Dict[int, str]) -> str:
        """
        Locate the split point and return the new separator.

        Membership queries go through the learner so they are counted, but
        they add nothing to the table and emit no events.
        """
        expected = learner.membership(counterexample)
        low, high = 0, len(counterexample)

        while high - low > 1:
            mid = low + (high - low) // 2
            state = hypothesis.run(counterexample[:mid])
            access_string = access_strings[state]
            result = learner.membership(access_string + counterexample[mid:])
            logger.debug("split %d: MQ(%r + %r) = %s", mid, access_string,
                         counterexample[mid:], result)

            if result == expected:
                low = mid
            else:
                high = mid

        return counterexample[high:]

    def process(self, learner, counterexample: str, hypothesis: DFA,
                access_strings: Dict[int, str]) -> Iterator[StepEvent]:
        suffix = self.find_suffix(learner, counterexample, hypothesis, access_strings)
        yield from learner.add_separator(suffix)
