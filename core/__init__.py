"""Core components for L* algorithm."""

from .dfa import DFA, TransitionError, run, equivalence
from .dot import DotFormatError, decode, encode
from .observation_table import ObservationTable, TableInvariantError, TableSnapshot
from .events import QueryCounters, StepEvent
from .lstar import LStarAlgorithm, learn, run_lstar
from .session import LearningSession, SessionAbortedError

__all__ = [
    "DFA", "TransitionError", "run", "equivalence",
    "DotFormatError", "decode", "encode",
    "ObservationTable", "TableInvariantError", "TableSnapshot",
    "QueryCounters", "StepEvent",
    "LStarAlgorithm", "learn", "run_lstar",
    "LearningSession", "SessionAbortedError",
]
