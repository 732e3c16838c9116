"""
Generate random DFAs for validation testing.

Random targets are total, have dense integer states and are connected from
the initial state, so L* can recover them up to minimization.
"""

from typing import Dict, List, Optional

import numpy as np

from core.dfa import DFA


def make_alphabet(alphabet_size: int) -> List[str]:
    """'0','1' for binary alphabets, then 'a', 'b', ... up to 26 symbols."""
    if alphabet_size <= 2:
        return ['0', '1'][:alphabet_size]
    if alphabet_size <= 26:
        return [chr(ord('a') + i) for i in range(alphabet_size)]
    raise ValueError(f"Alphabet size {alphabet_size} exceeds 26 single-character symbols")


class RandomDFAGenerator:
    """Generate random DFAs with configurable alphabet sizes."""

    def __init__(self, alphabet_size: int = 2, seed: Optional[int] = None):
        """
        Initialize generator with specified alphabet size.

        Args:
            alphabet_size: Number of symbols in the alphabet
            seed: Random seed for reproducibility
        """
        if alphabet_size < 1:
            raise ValueError("The alphabet needs at least one symbol")
        self.alphabet_size = alphabet_size
        self.alphabet = make_alphabet(alphabet_size)
        self.rng = np.random.default_rng(seed)

    def generate_random_dfa(self, num_states: int,
                            accepting_ratio: float = 0.3) -> DFA:
        """
        Generate a random DFA with specified parameters.

        Args:
            num_states: Number of states in the DFA
            accepting_ratio: Ratio of accepting states (0.0 to 1.0)

        Returns:
            Random DFA instance with initial state 0
        """
        if num_states < 1:
            raise ValueError("A DFA needs at least one state")

        states = list(range(num_states))

        # Random accepting states based on ratio, keeping one rejecting state
        num_accepting = max(1, int(num_states * accepting_ratio))
        num_accepting = min(num_accepting, max(1, num_states - 1))
        accepting_states = {
            int(s) for s in self.rng.choice(num_states, size=num_accepting, replace=False)
        }

        transitions = self._spanning_transitions(num_states)

        # Remaining transitions go anywhere
        for state in states:
            for symbol in self.alphabet:
                if symbol not in transitions[state]:
                    transitions[state][symbol] = int(self.rng.integers(num_states))

        return DFA(
            states=states,
            alphabet=self.alphabet,
            transitions=transitions,
            initial_state=0,
            final_states=accepting_states
        )

    def _spanning_transitions(self, num_states: int) -> Dict[int, Dict[str, int]]:
        """
        Random spanning tree rooted at state 0.

        State i is entered from an unused (state, symbol) slot of some state
        below i; there are i·|Σ| - (i-1) ≥ 1 such slots, so one always exists.
        """
        transitions: Dict[int, Dict[str, int]] = {state: {} for state in range(num_states)}
        free_slots = [(0, symbol) for symbol in self.alphabet]

        for state in range(1, num_states):
            source, symbol = free_slots.pop(int(self.rng.integers(len(free_slots))))
            transitions[source][symbol] = state
            free_slots.extend((state, a) for a in self.alphabet)

        return transitions


def generate_random_dfas(count: int, num_states: int, alphabet_size: int = 2,
                         accepting_ratio: float = 0.3,
                         seed: Optional[int] = None) -> List[DFA]:
    """Generate a reproducible batch of random DFAs."""
    generator = RandomDFAGenerator(alphabet_size, seed=seed)
    return [generator.generate_random_dfa(num_states, accepting_ratio) for _ in range(count)]
