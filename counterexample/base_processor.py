"""
Abstract base class for counterexample processors in L* learning.

A processor turns a counterexample returned by an equivalence query into new
observation table entries:
- Angluin (add every prefix as a state prefix)
- Maler-Pnueli (add every suffix as a separator)
- Rivest-Schapire (binary search for a single separator)
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Iterator, Union

from core.dfa import DFA
from core.events import StepEvent


class CounterexampleStrategy(Enum):
    """Available counterexample processing strategies."""
    ANGLUIN = "angluin"
    MALER_PNUELI = "maler-pnueli"
    RIVEST_SCHAPIRE = "rivest-schapire"

    @classmethod
    def parse(cls, value: Union[str, "CounterexampleStrategy"]) -> "CounterexampleStrategy":
        """Accept an enum member or its name string."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unknown counterexample strategy: {value}. "
                f"Available strategies: {[s.value for s in cls]}"
            ) from None


class CounterexampleProcessor(ABC):
    """
    Abstract base class for counterexample processors.

    Processors mutate the table only through the learner's generator
    operations (add_state, add_separator, promote), so every table change
    they cause is observable as step events.
    """

    strategy: CounterexampleStrategy

    @abstractmethod
    def process(self, learner, counterexample: str, hypothesis: DFA,
                access_strings: Dict[int, str]) -> Iterator[StepEvent]:
        """
        Refine the observation table with a counterexample.

        Args:
            learner: LStarAlgorithm owning the observation table
            counterexample: Word on which target and hypothesis disagree
            hypothesis: The rejected hypothesis
            access_strings: Hypothesis state id → state prefix

        Yields:
            Step events of the table mutations performed
        """

    @property
    def name(self) -> str:
        return self.strategy.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
