"""
Deterministic Finite Automaton (DFA) implementation.

A DFA is formally a 5-tuple (Q, Σ, δ, q₀, F) where Q is the state set,
Σ is the alphabet, δ: Q × Σ → Q is the transition function,
q₀ is the initial state, and F is the set of accepting states.

States are dense integer ids 0..n-1 and symbols are single characters,
so a word is simply a string.
"""

from typing import Set, Dict, List, Optional, Union, Iterable
from collections import deque


class TransitionError(LookupError):
    """Raised when a word uses a (state, symbol) pair with no transition."""

    def __init__(self, state: int, symbol: str):
        super().__init__(f"No transition for state {state} and symbol {symbol!r}")
        self.state = state
        self.symbol = symbol


class DFA:
    """Deterministic Finite Automaton with L*-specific operations."""

    def __init__(self,
                 states: Optional[Iterable[int]] = None,
                 alphabet: Optional[Iterable[str]] = None,
                 transitions: Optional[Dict[int, Dict[str, int]]] = None,
                 initial_state: int = 0,
                 final_states: Optional[Iterable[int]] = None):
        """
        Initialize DFA.

        Args:
            states: State identifiers (dense ids 0..n-1)
            alphabet: Ordered alphabet symbols
            transitions: Nested dict mapping state × symbol → state
            initial_state: Starting state identifier
            final_states: Accepting state identifiers
        """
        self.states: List[int] = list(states or [])
        self.alphabet: List[str] = list(alphabet or [])
        self.delta: Dict[int, Dict[str, int]] = {
            state: dict(successors)
            for state, successors in (transitions or {}).items()
        }
        self.q0 = initial_state
        self.F: Set[int] = set(final_states or [])

    @property
    def start(self) -> int:
        return self.q0

    @property
    def accepting(self) -> Set[int]:
        return self.F

    def is_accepting(self, state: int) -> bool:
        return state in self.F

    def step(self, state: int, symbol: str) -> int:
        """Single transition; raises TransitionError when undefined."""
        successor = self.delta.get(state, {}).get(symbol)
        if successor is None:
            raise TransitionError(state, symbol)
        return successor

    def run(self, word: str, start: Optional[int] = None) -> int:
        """
        Consume word symbol by symbol from start (default q₀).

        Args:
            word: Input string
            start: State to start from

        Returns:
            State reached after the whole word

        Raises:
            TransitionError: If a transition on the way is undefined

        Time Complexity: O(|word|)
        """
        state = self.q0 if start is None else start
        for symbol in word:
            state = self.step(state, symbol)
        return state

    def accepts(self, word: str) -> bool:
        """Determine if DFA accepts given word."""
        return self.run(word) in self.F

    def classify_word(self, word: str) -> bool:
        return self.accepts(word)

    def equivalence(self, other: 'DFA') -> Union[bool, str]:
        """
        Compare languages by BFS over the product automaton.

        Both automata are assumed to share the same alphabet. Pairs are
        visited in breadth-first order, so the first disagreement found is a
        shortest counterexample.

        Args:
            other: Automaton to compare with

        Returns:
            True if the languages are equal, otherwise a word accepted by
            exactly one of the two automata

        Time Complexity: O(|Q₁| × |Q₂| × |Σ|)
        """
        start = (self.q0, other.q0)
        queue = deque([(self.q0, other.q0, "")])
        visited = {start}

        while queue:
            s1, s2, word = queue.popleft()
            if self.is_accepting(s1) != other.is_accepting(s2):
                return word

            for symbol in self.alphabet:
                next_pair = (self.step(s1, symbol), other.step(s2, symbol))
                if next_pair not in visited:
                    visited.add(next_pair)
                    queue.append((next_pair[0], next_pair[1], word + symbol))

        return True

    def reachable_states(self) -> List[int]:
        """States reachable from q₀, in BFS order."""
        seen = {self.q0}
        order = [self.q0]
        queue = deque([self.q0])
        while queue:
            current = queue.popleft()
            for symbol in self.alphabet:
                next_state = self.delta.get(current, {}).get(symbol)
                if next_state is not None and next_state not in seen:
                    seen.add(next_state)
                    order.append(next_state)
                    queue.append(next_state)
        return order

    def is_total(self) -> bool:
        """Every declared state has a transition for every symbol."""
        return all(
            symbol in self.delta.get(state, {})
            for state in self.states
            for symbol in self.alphabet
        )

    def is_isomorphic(self, other: 'DFA') -> bool:
        """
        Check that both automata are equal up to renaming of states.

        Builds the bijection rooted at the two start states and requires it
        to cover every declared state of both automata.
        """
        if len(self.states) != len(other.states):
            return False
        if set(self.alphabet) != set(other.alphabet):
            return False

        mapping = {self.q0: other.q0}
        queue = deque([self.q0])
        while queue:
            s1 = queue.popleft()
            s2 = mapping[s1]
            if self.is_accepting(s1) != other.is_accepting(s2):
                return False
            for symbol in self.alphabet:
                n1 = self.delta.get(s1, {}).get(symbol)
                n2 = other.delta.get(s2, {}).get(symbol)
                if (n1 is None) != (n2 is None):
                    return False
                if n1 is None:
                    continue
                if n1 in mapping:
                    if mapping[n1] != n2:
                        return False
                else:
                    mapping[n1] = n2
                    queue.append(n1)

        # Injective and covering every state
        return (len(mapping) == len(self.states)
                and len(set(mapping.values())) == len(mapping))

    def minimize(self) -> 'DFA':
        """
        Return minimized equivalent DFA using partition refinement.

        Unreachable states are dropped first. States of the result are
        renumbered in BFS order from the initial state.

        Returns:
            New minimized DFA instance

        Time Complexity: O(|Σ| × n²) worst case
        """
        reachable = self.reachable_states()

        # Initial partition: accepting vs non-accepting
        block_of = {s: (0 if s in self.F else 1) for s in reachable}

        while True:
            signatures = {}
            new_block_of = {}
            for state in reachable:
                signature = (block_of[state],) + tuple(
                    block_of[self.step(state, symbol)] for symbol in self.alphabet
                )
                if signature not in signatures:
                    signatures[signature] = len(signatures)
                new_block_of[state] = signatures[signature]

            refined = len(set(new_block_of.values())) != len(set(block_of.values()))
            block_of = new_block_of
            if not refined:
                break

        return self._build_minimized_dfa(block_of)

    def _build_minimized_dfa(self, block_of: Dict[int, int]) -> 'DFA':
        """Construct minimized DFA from partition refinement result."""
        # Renumber blocks in BFS order starting from the initial block
        block_ids = {block_of[self.q0]: 0}
        representatives = [self.q0]
        queue = deque([self.q0])
        while queue:
            state = queue.popleft()
            for symbol in self.alphabet:
                target = self.step(state, symbol)
                if block_of[target] not in block_ids:
                    block_ids[block_of[target]] = len(block_ids)
                    representatives.append(target)
                    queue.append(target)

        transitions = {}
        final_states = set()
        for new_id, representative in enumerate(representatives):
            transitions[new_id] = {
                symbol: block_ids[block_of[self.step(representative, symbol)]]
                for symbol in self.alphabet
            }
            if representative in self.F:
                final_states.add(new_id)

        return DFA(
            states=range(len(representatives)),
            alphabet=self.alphabet,
            transitions=transitions,
            initial_state=0,
            final_states=final_states
        )

    def to_dot(self) -> str:
        """Graphviz DOT text for this automaton (see core.dot.encode)."""
        from .dot import encode
        return encode(self)

    @classmethod
    def from_dot(cls, text: str) -> 'DFA':
        from .dot import decode
        return decode(text)

    def __len__(self) -> int:
        """Return number of states."""
        return len(self.states)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DFA):
            return NotImplemented
        return (self.states == other.states
                and self.alphabet == other.alphabet
                and self.delta == other.delta
                and self.q0 == other.q0
                and self.F == other.F)

    __hash__ = None

    def __repr__(self) -> str:
        return (f"DFA(states={self.states}, alphabet={self.alphabet}, "
                f"transitions={self.delta}, initial_state={self.q0}, "
                f"final_states={sorted(self.F)})")

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"DFA(|Q|={len(self.states)}, |Σ|={len(self.alphabet)}, "
                f"q0={self.q0}, |F|={len(self.F)})")


def run(automaton: DFA, word: str, start: Optional[int] = None) -> int:
    """Module-level form of DFA.run."""
    return automaton.run(word, start)


def equivalence(a: DFA, b: DFA) -> Union[bool, str]:
    """Module-level form of DFA.equivalence."""
    return a.equivalence(b)
