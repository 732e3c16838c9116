"""
L* Algorithm implementation based on Angluin (1987).

Algorithm learns a minimal DFA for an unknown regular language using membership and
equivalence queries with polynomial complexity in the number of states and the length
of counterexamples.

Learning is exposed as a generator of StepEvents: every table mutation and every
membership query that fills a cell is a resumption point, and the generator's return
value is the learned DFA. The caller decides the pace.
"""

import json
import logging
from typing import Dict, Generator, Optional

import counterexample as cex_processing

from .dfa import DFA
from .events import QueryCounters, StepEvent
from .observation_table import ObservationTable, TableInvariantError

logger = logging.getLogger(__name__)

DEFAULT_STRATEGY = "angluin"


def _quote(word: str) -> str:
    return json.dumps(word)


class LStarAlgorithm:
    """L* learning algorithm implementation."""

    def __init__(self, teacher, counterexample_strategy=DEFAULT_STRATEGY):
        """
        Initialize L* learner.

        Args:
            teacher: Oracle with alphabet, membership(word) and equivalence(hypothesis)
            counterexample_strategy: "angluin", "maler-pnueli" or "rivest-schapire"

        Raises:
            ValueError: If the strategy is unknown
        """
        self.teacher = teacher
        self.alphabet = list(teacher.alphabet)
        self.processor = cex_processing.get_processor(counterexample_strategy)

        self.table = ObservationTable(self.alphabet)

        # Statistics
        self.membership_queries = 0
        self.equivalence_queries = 0
        self.iterations = 0
        self.counterexamples = []
        self.hypothesis: Optional[DFA] = None
        self._started = False

    @property
    def strategy(self):
        return self.processor.strategy

    @property
    def counters(self) -> QueryCounters:
        return QueryCounters(self.membership_queries, self.equivalence_queries)

    def event(self, message: str, important: bool = False,
              hypothesis: Optional[DFA] = None,
              counterexample: Optional[str] = None) -> StepEvent:
        """Freeze the current table and counters into an event."""
        if important:
            logger.info(message)
        return StepEvent(
            message=message,
            important=important,
            table=self.table.snapshot(),
            hypothesis=hypothesis,
            counterexample=counterexample,
            counters=self.counters,
        )

    def membership(self, word: str) -> bool:
        """Ask the teacher one membership query and count it."""
        self.membership_queries += 1
        return bool(self.teacher.membership(word))

    def _fill(self, prefix: str, separator: str, row) -> StepEvent:
        result = self.membership(prefix + separator)
        row.append(result)
        logger.debug("MQ(%r + %r) = %s", prefix, separator, result)
        return self.event(
            f"The result of MQ({_quote(prefix)} + {_quote(separator)}) "
            f"is {'true' if result else 'false'}."
        )

    def add_state(self, prefix: str) -> Generator[StepEvent, None, None]:
        """Insert a new state prefix, fill its row and add its extensions."""
        row = self.table.insert_state(prefix)
        yield self.event(
            f"A state prefix {_quote(prefix)} is added to the observation table.",
            important=True)

        for separator in list(self.table.separators):
            yield self._fill(prefix, separator, row)

        yield from self._add_missing_extensions(prefix)

    def add_separator(self, separator: str) -> Generator[StepEvent, None, None]:
        """Append a separator column and backfill every existing row."""
        self.table.insert_separator(separator)
        yield self.event(
            f"A separator {_quote(separator)} is added to the observation table.",
            important=True)

        for prefix, row in list(self.table.states.items()):
            yield self._fill(prefix, separator, row)
        for prefix, row in list(self.table.extensions.items()):
            yield self._fill(prefix, separator, row)

    def add_extension(self, prefix: str) -> Generator[StepEvent, None, None]:
        """Insert a candidate prefix and fill its row."""
        row = self.table.insert_extension(prefix)
        yield self.event(
            f"An extension prefix {_quote(prefix)} is added to the observation table.")

        for separator in list(self.table.separators):
            yield self._fill(prefix, separator, row)

    def promote(self, prefix: str) -> Generator[StepEvent, None, None]:
        """Move an extension prefix to the state prefixes."""
        self.table.move_to_states(prefix)
        yield self.event(
            f"The extension prefix {_quote(prefix)} is promoted to a state prefix.",
            important=True)

        yield from self._add_missing_extensions(prefix)

    def _add_missing_extensions(self, prefix: str) -> Generator[StepEvent, None, None]:
        for a in self.alphabet:
            extension = prefix + a
            if not self.table.is_classified(extension):
                yield from self.add_extension(extension)

    def _refine_table(self) -> Generator[StepEvent, None, None]:
        """
        Make observation table closed and consistent.

        Inconsistencies are resolved before closedness is checked, one fix
        per pass.
        """
        while True:
            separator = self.table.find_inconsistency()
            if separator is not None:
                yield from self.add_separator(separator)
                continue

            prefix = self.table.find_unclosed_row()
            if prefix is not None:
                yield from self.promote(prefix)
                continue

            return

    def steps(self) -> Generator[StepEvent, None, DFA]:
        """
        Execute L* learning algorithm step by step.

        Yields:
            One StepEvent per table mutation, membership query filling a
            cell, hypothesis, counterexample and the final verdict

        Returns:
            Learned DFA (as the generator's return value)

        Raises:
            TableInvariantError: If a counterexample does not refine the table
            Any exception raised by the teacher, unmodified
        """
        if self._started:
            raise TableInvariantError("This learner has already been started.")
        self._started = True

        yield from self.add_separator("")
        yield from self.add_state("")

        while True:
            self.iterations += 1

            # Phase 1: Make table closed and consistent
            yield from self._refine_table()

            # Phase 2: Construct hypothesis DFA
            hypothesis, access_strings = self.table.make_hypothesis()
            self.hypothesis = hypothesis
            yield self.event("The observation table is closed and consistent.",
                             important=True, hypothesis=hypothesis)

            # Phase 3: Equivalence query
            self.equivalence_queries += 1
            result = self.teacher.equivalence(hypothesis)

            if result is True:
                yield self.event(
                    "The hypothesis is equivalent to the target automaton. Learning is done.",
                    important=True)
                logger.info("Learned DFA with %d states in %d iterations "
                            "(%d MQs, %d EQs)", len(hypothesis), self.iterations,
                            self.membership_queries, self.equivalence_queries)
                return hypothesis

            if not isinstance(result, str):
                raise TypeError(
                    f"equivalence() must return True or a counterexample string, "
                    f"got {result!r}")

            # Phase 4: Process counterexample
            counterexample = result
            self.counterexamples.append(counterexample)
            yield self.event(f"A counterexample {_quote(counterexample)} is found.",
                             important=True, counterexample=counterexample)

            size_before = (len(self.table.states), len(self.table.separators))
            yield from self.processor.process(self, counterexample, hypothesis, access_strings)
            if (len(self.table.states), len(self.table.separators)) == size_before:
                raise TableInvariantError(
                    f"The counterexample {_quote(counterexample)} did not refine "
                    f"the observation table.")

    def run(self) -> DFA:
        """
        Execute L* to completion, discarding the events.

        Returns:
            Learned DFA
        """
        steps = self.steps()
        while True:
            try:
                next(steps)
            except StopIteration as stop:
                return stop.value

    def get_statistics(self) -> Dict[str, object]:
        """
        Return learning statistics.

        Returns:
            Dictionary with query counts and table sizes
        """
        return {
            "strategy": self.strategy.value,
            "iterations": self.iterations,
            "membership_queries": self.membership_queries,
            "equivalence_queries": self.equivalence_queries,
            "counterexamples": len(self.counterexamples),
            "avg_ce_length": sum(len(ce) for ce in self.counterexamples) / max(1, len(self.counterexamples)),
            "final_states": len(self.hypothesis) if self.hypothesis else 0,
            "table_stats": self.table.get_statistics(),
        }

    def print_summary(self):
        """Print learning summary."""
        stats = self.get_statistics()

        print("\n" + "=" * 50)
        print("L* Learning Summary")
        print("=" * 50)

        print(f"Strategy: {stats['strategy']}")
        print(f"Iterations: {stats['iterations']}")
        print(f"Final DFA states: {stats['final_states']}")

        print(f"\nMembership queries: {stats['membership_queries']}")
        print(f"Equivalence queries: {stats['equivalence_queries']}")
        print(f"Counterexamples: {stats['counterexamples']}")
        print(f"Average CE length: {stats['avg_ce_length']:.1f}")

        print(f"\nTable statistics:")
        table_stats = stats['table_stats']
        print(f"  State prefixes: {table_stats['states']}")
        print(f"  Extension prefixes: {table_stats['extensions']}")
        print(f"  Separators: {table_stats['separators']}")

        print("=" * 50)


def learn(teacher, counterexample_strategy=DEFAULT_STRATEGY) -> Generator[StepEvent, None, DFA]:
    """
    Start a learning session.

    Args:
        teacher: Oracle providing queries
        counterexample_strategy: Counterexample processing strategy name

    Returns:
        Generator of step events whose return value is the learned DFA
    """
    return LStarAlgorithm(teacher, counterexample_strategy).steps()


def run_lstar(teacher, counterexample_strategy=DEFAULT_STRATEGY) -> DFA:
    """
    Convenience function: learn to completion and print a summary.

    Args:
        teacher: Oracle providing queries
        counterexample_strategy: Counterexample processing strategy name

    Returns:
        Learned DFA
    """
    learner = LStarAlgorithm(teacher, counterexample_strategy)
    dfa = learner.run()
    learner.print_summary()
    return dfa
