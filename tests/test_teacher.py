"""Tests for teachers and the BFS equivalence oracle."""

import pytest

from core.dfa import DFA
from core.dot import DotFormatError
from core.session import LearningSession
from grammars.presets import EVEN_ZEROS_DOT
from grammars.tomita import tomita_4
from teacher import BFSOracle, DFATeacher, PredicateTeacher, Teacher


def universal(alphabet):
    return DFA(states=[0], alphabet=alphabet,
               transitions={0: {symbol: 0 for symbol in alphabet}}, final_states={0})


class TestDFATeacher:
    """Test the exact teacher."""

    def test_membership_is_counted(self, even_zeros):
        teacher = DFATeacher(even_zeros)

        assert teacher.membership("00")
        assert not teacher.membership("0")
        assert teacher.membership("10") is False
        assert teacher.get_statistics()["membership_queries"] == 3

    def test_equivalence_accepts_equal_language(self, even_zeros):
        teacher = DFATeacher(even_zeros)

        assert teacher.equivalence(even_zeros.minimize()) is True
        assert teacher.counterexamples == []
        # Only counterexamples are kept between queries
        lists = [value for value in vars(teacher).values() if isinstance(value, list)]
        assert all(isinstance(item, str) for value in lists for item in value)

    def test_equivalence_returns_shortest_counterexample(self, even_zeros):
        teacher = DFATeacher(even_zeros)

        assert teacher.equivalence(universal(["0", "1"])) == "0"
        assert teacher.counterexamples == ["0"]
        assert teacher.get_statistics() == {
            'membership_queries': 0,
            'equivalence_queries': 1,
            'counterexamples': 1,
        }

    def test_from_dot(self, even_zeros):
        teacher = DFATeacher.from_dot(EVEN_ZEROS_DOT)

        assert teacher.alphabet == ["0", "1"]
        assert teacher.target == even_zeros

    def test_from_invalid_dot(self):
        with pytest.raises(DotFormatError):
            DFATeacher.from_dot("digraph {}")

    def test_teacher_is_abstract(self):
        with pytest.raises(TypeError):
            Teacher(["0"])


class TestBFSOracle:
    """Test the depth-bounded equivalence oracle."""

    def test_finds_shortest_counterexample(self):
        oracle = BFSOracle(tomita_4, ["0", "1"], max_depth=5)

        assert oracle.find_counterexample(universal(["0", "1"])) == "000"
        assert oracle.get_statistics()['counterexamples_found'] == 1

    def test_empty_word_checked_first(self):
        oracle = BFSOracle(lambda word: False, ["0", "1"])

        assert oracle.find_counterexample(universal(["0", "1"])) == ""

    def test_depth_bound(self):
        oracle = BFSOracle(lambda word: len(word) < 4, ["a"], max_depth=3)

        assert oracle.find_counterexample(universal(["a"])) is None
        stats = oracle.get_statistics()
        assert stats['total_strings_checked'] == 4
        assert stats['max_depth_reached'] == 3

    def test_breadth_limit(self):
        # Only the first word of each level is checked, so "1" is never seen
        oracle = BFSOracle(lambda word: "1" not in word, ["0", "1"],
                           max_depth=2, breadth_limit=1)

        assert oracle.find_counterexample(universal(["0", "1"])) is None


class TestPredicateTeacher:
    """Test the predicate-backed teacher."""

    def test_queries(self):
        teacher = PredicateTeacher(["0", "1"], tomita_4, max_depth=6)

        assert teacher.membership("0010")
        assert not teacher.membership("1000")
        assert teacher.equivalence(universal(["0", "1"])) == "000"

    def test_learns_through_session(self):
        teacher = PredicateTeacher(["0", "1"], tomita_4, max_depth=8)

        result = LearningSession(teacher, "rivest-schapire").run()

        assert len(result) == 4
        assert teacher.get_statistics()['oracle_specific']['total_queries'] == \
            teacher.equivalence_count
