"""
BFS (Breadth-First Search) Equivalence Oracle

Systematically explores strings in breadth-first order to find counterexamples
against a black-box membership function. Exploration is bounded by depth, so
equivalence is only established up to max_depth; the shortest counterexample
within that bound is always found first.
"""

import logging
import time
from collections import deque
from typing import Any, Callable, Dict, List, Optional

from core.dfa import DFA

logger = logging.getLogger(__name__)


class BFSOracle:
    """
    BFS equivalence oracle for systematic exploration.

    Explores strings in order of increasing length, guaranteeing that
    the shortest counterexample will be found first.
    """

    def __init__(self, classify_word: Callable[[str], bool], alphabet: List[str],
                 max_depth: int = 8,
                 breadth_limit: Optional[int] = None):
        """
        Initialize BFS oracle.

        Args:
            classify_word: Membership function of the target language
            alphabet: Input alphabet
            max_depth: Maximum string length to explore
            breadth_limit: Maximum strings to check at each depth (None: all)
        """
        self.classify_word = classify_word
        self.alphabet = list(alphabet)
        self.max_depth = max_depth
        self.breadth_limit = breadth_limit

        # Statistics tracking
        self.total_queries = 0
        self.counterexamples_found = 0
        self.total_strings_checked = 0
        self.max_depth_reached = 0
        self.total_time = 0.0

    def find_counterexample(self, hypothesis_dfa: DFA) -> Optional[str]:
        """
        Find counterexample using breadth-first search.

        Args:
            hypothesis_dfa: Current hypothesis DFA

        Returns:
            Counterexample string or None
        """
        start_time = time.time()
        self.total_queries += 1
        strings_checked = 0

        queue = deque([""])
        depth = 0
        try:
            while queue and depth <= self.max_depth:
                level_size = len(queue)
                for index in range(level_size):
                    current = queue.popleft()
                    if self.breadth_limit is not None and index >= self.breadth_limit:
                        continue

                    strings_checked += 1
                    if self._check_string(current, hypothesis_dfa):
                        self.counterexamples_found += 1
                        self.max_depth_reached = max(self.max_depth_reached, depth)
                        logger.debug("BFS counterexample %r after %d strings",
                                     current, strings_checked)
                        return current

                    if depth < self.max_depth:
                        queue.extend(current + symbol for symbol in self.alphabet)
                depth += 1

            self.max_depth_reached = max(self.max_depth_reached, depth - 1)
            logger.debug("No counterexample up to length %d (%d strings)",
                         self.max_depth, strings_checked)
            return None
        finally:
            self.total_strings_checked += strings_checked
            self.total_time += time.time() - start_time

    def _check_string(self, string: str, hypothesis_dfa: DFA) -> bool:
        """
        Check if a string is a counterexample.

        Args:
            string: String to check
            hypothesis_dfa: Hypothesis DFA

        Returns:
            True if hypothesis and target disagree on string
        """
        return hypothesis_dfa.accepts(string) != bool(self.classify_word(string))

    def get_statistics(self) -> Dict[str, Any]:
        """Return oracle statistics."""
        return {
            'total_queries': self.total_queries,
            'counterexamples_found': self.counterexamples_found,
            'total_strings_checked': self.total_strings_checked,
            'max_depth': self.max_depth,
            'max_depth_reached': self.max_depth_reached,
            'breadth_limit': self.breadth_limit,
            'avg_strings_per_query': (
                self.total_strings_checked / max(1, self.total_queries)
            ),
            'total_time': self.total_time,
        }
