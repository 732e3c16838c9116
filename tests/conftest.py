"""Shared fixtures for the L* test suite."""

import pytest

from core.dfa import DFA
from core.dot import decode
from grammars.presets import EVEN_ZEROS_DOT, THREE_STATES_DOT
from teacher.teacher import DFATeacher


@pytest.fixture
def even_zeros():
    """Two states over 0/1: accept words with an even number of 0s."""
    return DFA(
        states=[0, 1],
        alphabet=["0", "1"],
        transitions={0: {"0": 1, "1": 0}, 1: {"0": 0, "1": 1}},
        initial_state=0,
        final_states={0},
    )


@pytest.fixture
def three_states():
    return decode(THREE_STATES_DOT)


@pytest.fixture
def even_zeros_teacher():
    return DFATeacher(decode(EVEN_ZEROS_DOT))


@pytest.fixture
def three_states_teacher(three_states):
    return DFATeacher(three_states)


class ScriptedTeacher:
    """
    Teacher with a fixed membership function and scripted EQ answers.

    Each equivalence query pops the next answer; once the script runs out
    every hypothesis is accepted.
    """

    def __init__(self, alphabet, predicate, answers=()):
        self.alphabet = list(alphabet)
        self.predicate = predicate
        self.answers = list(answers)
        self.membership_count = 0

    def membership(self, word):
        self.membership_count += 1
        return self.predicate(word)

    def equivalence(self, hypothesis):
        if self.answers:
            answer = self.answers.pop(0)
            if isinstance(answer, Exception):
                raise answer
            return answer
        return True


@pytest.fixture
def scripted_teacher():
    return ScriptedTeacher
