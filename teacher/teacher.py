"""
Teachers for L*.

A teacher knows the target language and answers the two kinds of queries the
learner may ask:
- membership(word) -> bool
- equivalence(hypothesis) -> True, or a counterexample word

DFATeacher answers exactly from a target DFA. PredicateTeacher wraps a Python
membership function and answers equivalence queries with a depth-bounded BFS.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Union

from core.dfa import DFA
from core.dot import decode

from .bfs_oracle import BFSOracle

logger = logging.getLogger(__name__)


class Teacher(ABC):
    """
    Teacher for L* algorithm - answers membership and equivalence queries.

    Subclasses implement classify_word and find_counterexample; the public
    query methods count queries and keep the counterexample history.
    """

    def __init__(self, alphabet: List[str]):
        self.alphabet = list(alphabet)

        # Statistics
        self.membership_count = 0
        self.equivalence_count = 0
        self.counterexamples: List[str] = []

    @abstractmethod
    def classify_word(self, word: str) -> bool:
        """Membership in the target language, without bookkeeping."""

    @abstractmethod
    def find_counterexample(self, hypothesis_dfa: DFA) -> Optional[str]:
        """A word on which hypothesis and target disagree, or None."""

    def membership(self, word: str) -> bool:
        """Single membership query."""
        self.membership_count += 1
        return bool(self.classify_word(word))

    def equivalence(self, hypothesis_dfa: DFA) -> Union[bool, str]:
        """
        Equivalence query.

        Args:
            hypothesis_dfa: L* proposed DFA

        Returns:
            True if equivalent, otherwise a counterexample
        """
        self.equivalence_count += 1

        counterexample = self.find_counterexample(hypothesis_dfa)
        if counterexample is None:
            logger.debug("EQ %d: hypothesis with %d states accepted",
                         self.equivalence_count, len(hypothesis_dfa))
            return True

        logger.debug("EQ %d: counterexample %r", self.equivalence_count, counterexample)
        self.counterexamples.append(counterexample)
        return counterexample

    def get_statistics(self) -> Dict:
        """Get teacher statistics."""
        return {
            'membership_queries': self.membership_count,
            'equivalence_queries': self.equivalence_count,
            'counterexamples': len(self.counterexamples),
        }


class DFATeacher(Teacher):
    """Teacher backed by a known target DFA; equivalence is exact."""

    def __init__(self, target: DFA):
        super().__init__(target.alphabet)
        self.target = target

    @classmethod
    def from_dot(cls, text: str) -> 'DFATeacher':
        """Build a teacher from DOT text (raises DotFormatError)."""
        return cls(decode(text))

    def classify_word(self, word: str) -> bool:
        return self.target.accepts(word)

    def find_counterexample(self, hypothesis_dfa: DFA) -> Optional[str]:
        # Product BFS returns the shortest disagreement
        result = self.target.equivalence(hypothesis_dfa)
        return None if result is True else result


class PredicateTeacher(Teacher):
    """
    Teacher backed by a membership function.

    Equivalence can only be checked up to max_depth, so the learned DFA is
    exact only if the language is distinguished by words of that length.
    """

    def __init__(self, alphabet: List[str], predicate: Callable[[str], bool],
                 max_depth: int = 8, breadth_limit: Optional[int] = None):
        super().__init__(alphabet)
        self.predicate = predicate
        self.oracle = BFSOracle(predicate, self.alphabet,
                                max_depth=max_depth, breadth_limit=breadth_limit)

    def classify_word(self, word: str) -> bool:
        return bool(self.predicate(word))

    def find_counterexample(self, hypothesis_dfa: DFA) -> Optional[str]:
        return self.oracle.find_counterexample(hypothesis_dfa)

    def get_statistics(self) -> Dict:
        stats = super().get_statistics()
        stats['oracle_specific'] = self.oracle.get_statistics()
        return stats
