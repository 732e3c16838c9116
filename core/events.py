"""Step events emitted by the L* engine."""

from dataclasses import dataclass, field
from typing import Optional

from .dfa import DFA
from .observation_table import TableSnapshot


@dataclass(frozen=True)
class QueryCounters:
    """Running totals of queries issued to the teacher."""

    membership_queries: int = 0
    equivalence_queries: int = 0

    def to_dict(self):
        return {
            "membership_queries": self.membership_queries,
            "equivalence_queries": self.equivalence_queries,
        }


@dataclass(frozen=True)
class StepEvent:
    """
    One observable step of a learning session.

    Important events mark coarse steps (a separator, state prefix or
    promotion, a hypothesis, a counterexample, the end); the rest are
    single membership queries and new extension rows.
    """

    message: str
    important: bool = False
    table: TableSnapshot = field(default_factory=TableSnapshot)
    hypothesis: Optional[DFA] = None
    counterexample: Optional[str] = None
    counters: QueryCounters = field(default_factory=QueryCounters)

    def __str__(self) -> str:
        return self.message
