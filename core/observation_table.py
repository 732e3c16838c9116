"""
Observation Table implementation for L* algorithm.

Rows are indexed by prefixes and columns by separators (suffixes). Prefixes
are split into state prefixes S and extension prefixes (candidates awaiting
promotion), each kept in insertion order. Cell (p, e) holds the membership
result of p·e.

The table itself never talks to the teacher: LStarAlgorithm issues the
membership queries and appends their results here one at a time, so that a
step event can be emitted after every single query.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from .dfa import DFA


class TableInvariantError(RuntimeError):
    """Raised when a prefix or separator would be classified twice."""


def encode_row(row) -> str:
    """Row signature as a bitstring, e.g. [True, False] -> "10"."""
    return "".join("1" if result else "0" for result in row)


@dataclass(frozen=True)
class TableSnapshot:
    """Immutable copy of an observation table at one instant."""

    separators: Tuple[str, ...] = ()
    states: Mapping[str, Tuple[bool, ...]] = field(
        default_factory=lambda: MappingProxyType({}))
    extensions: Mapping[str, Tuple[bool, ...]] = field(
        default_factory=lambda: MappingProxyType({}))

    def row(self, prefix: str) -> Tuple[bool, ...]:
        if prefix in self.states:
            return self.states[prefix]
        return self.extensions[prefix]

    def __str__(self) -> str:
        return render_table(self.separators, self.states, self.extensions)


def render_table(separators, states, extensions) -> str:
    """Plain text grid, states above a rule and extensions below."""
    def show(word: str) -> str:
        return word if word else "ε"

    prefixes = list(states) + list(extensions)
    width = max([len(show(p)) for p in prefixes] + [1])
    header = " " * width + " | " + " ".join(show(e) for e in separators)
    lines = [header, "-" * len(header)]

    def line(prefix, row):
        cells = " ".join(
            ("1" if result else "0").rjust(len(show(e)))
            for e, result in zip(separators, row)
        )
        return show(prefix).rjust(width) + " | " + cells

    lines.extend(line(p, r) for p, r in states.items())
    lines.append("-" * len(header))
    lines.extend(line(p, r) for p, r in extensions.items())
    return "\n".join(lines)


class ObservationTable:
    """Observation table for L* learning."""

    def __init__(self, alphabet: List[str]):
        """
        Initialize an empty observation table.

        Args:
            alphabet: Input alphabet Σ, in the order used for iteration
        """
        self.A = list(alphabet)
        self.separators: List[str] = []
        self.states: Dict[str, List[bool]] = {}
        self.extensions: Dict[str, List[bool]] = {}

    def is_classified(self, prefix: str) -> bool:
        return prefix in self.states or prefix in self.extensions

    def row(self, prefix: str) -> List[bool]:
        """Row of a state or extension prefix."""
        if prefix in self.states:
            return self.states[prefix]
        return self.extensions[prefix]

    def insert_state(self, prefix: str) -> List[bool]:
        """Insert an empty state row and return it for filling."""
        if self.is_classified(prefix):
            raise TableInvariantError(
                f"The state prefix {prefix!r} is already in the observation table."
            )
        row: List[bool] = []
        self.states[prefix] = row
        return row

    def insert_extension(self, prefix: str) -> List[bool]:
        """Insert an empty extension row and return it for filling."""
        if self.is_classified(prefix):
            raise TableInvariantError(
                f"The prefix {prefix!r} is already in the observation table."
            )
        row: List[bool] = []
        self.extensions[prefix] = row
        return row

    def insert_separator(self, separator: str):
        if separator in self.separators:
            raise TableInvariantError(
                f"The separator {separator!r} is already in the observation table."
            )
        self.separators.append(separator)

    def move_to_states(self, prefix: str) -> List[bool]:
        """Promote an extension prefix; its row is kept as is."""
        if prefix not in self.extensions:
            raise TableInvariantError(
                f"The extension prefix {prefix!r} is not in the observation table."
            )
        if prefix in self.states:
            raise TableInvariantError(
                f"The state prefix {prefix!r} is already in the observation table."
            )
        row = self.extensions.pop(prefix)
        self.states[prefix] = row
        return row

    def missing_extensions(self, prefix: str) -> List[str]:
        """One-symbol extensions of prefix not yet in the table."""
        return [prefix + a for a in self.A if not self.is_classified(prefix + a)]

    def find_inconsistency(self) -> Optional[str]:
        """
        Find a separator that resolves an inconsistency.

        Table is inconsistent if ∃s1,s2 ∈ S, a ∈ Σ:
        row(s1) = row(s2) but row(s1·a) ≠ row(s2·a)

        Pairs are scanned in insertion order (s1 before s2), symbols in
        alphabet order; the first differing column e yields a·e.

        Returns:
            New separator, or None if the table is consistent
        """
        states = list(self.states)
        for i, s1 in enumerate(states):
            for s2 in states[i + 1:]:
                if self.states[s1] != self.states[s2]:
                    continue

                for a in self.A:
                    row1 = self.row(s1 + a)
                    row2 = self.row(s2 + a)
                    for index, (r1, r2) in enumerate(zip(row1, row2)):
                        if r1 != r2:
                            return a + self.separators[index]
        return None

    def find_unclosed_row(self) -> Optional[str]:
        """
        Find an extension prefix with no matching state row.

        Table is closed if every extension row equals some state row.

        Returns:
            First such extension prefix in insertion order, or None
        """
        state_rows = {encode_row(row) for row in self.states.values()}
        for prefix, row in self.extensions.items():
            if encode_row(row) not in state_rows:
                return prefix
        return None

    def is_closed(self) -> bool:
        """Check if table is closed."""
        return self.find_unclosed_row() is None

    def is_consistent(self) -> bool:
        """Check if table is consistent."""
        return self.find_inconsistency() is None

    def make_hypothesis(self) -> Tuple[DFA, Dict[int, str]]:
        """
        Construct a DFA from a closed and consistent table.

        States with equal rows form one equivalence class. Classes get dense
        ids in the insertion order of their first state prefix, which is also
        the access string recorded for the class. The empty prefix is always
        inserted first, so the initial state is 0.

        Returns:
            (hypothesis, id → access string)
        """
        row_to_id: Dict[str, int] = {}
        access_strings: Dict[int, str] = {}
        for prefix, row in self.states.items():
            signature = encode_row(row)
            if signature not in row_to_id:
                row_to_id[signature] = len(row_to_id)
                access_strings[row_to_id[signature]] = prefix

        # Acceptance is read from the "" column
        empty_index = self.separators.index("")

        transitions = {}
        final_states = set()
        for state_id, prefix in access_strings.items():
            transitions[state_id] = {
                a: row_to_id[encode_row(self.row(prefix + a))] for a in self.A
            }
            if self.states[prefix][empty_index]:
                final_states.add(state_id)

        hypothesis = DFA(
            states=range(len(access_strings)),
            alphabet=self.A,
            transitions=transitions,
            initial_state=row_to_id[encode_row(self.states[""])],
            final_states=final_states
        )
        return hypothesis, access_strings

    def snapshot(self) -> TableSnapshot:
        """Deep, read-only copy of the current table."""
        return TableSnapshot(
            separators=tuple(self.separators),
            states=MappingProxyType({p: tuple(r) for p, r in self.states.items()}),
            extensions=MappingProxyType({p: tuple(r) for p, r in self.extensions.items()}),
        )

    def get_statistics(self) -> Dict[str, int]:
        """Return table size statistics."""
        return {
            "states": len(self.states),
            "extensions": len(self.extensions),
            "separators": len(self.separators),
            "cells": (len(self.states) + len(self.extensions)) * len(self.separators),
        }

    def __str__(self) -> str:
        """String representation for debugging."""
        return render_table(self.separators, self.states, self.extensions)
