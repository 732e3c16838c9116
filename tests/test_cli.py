"""Tests for the run_lstar command line."""

import pytest

from benchmarks.learning_config import LearningConfig
from grammars.presets import THREE_STATES_DOT
from run_lstar import build_teacher, main
from teacher.teacher import DFATeacher, PredicateTeacher


class TestBuildTeacher:
    """Test teacher selection from a configuration."""

    def test_preset(self):
        teacher = build_teacher(LearningConfig(preset="tomita2"))

        assert isinstance(teacher, DFATeacher)
        assert len(teacher.target) == 3

    def test_dot_file(self, tmp_path):
        path = tmp_path / "target.dot"
        path.write_text(THREE_STATES_DOT)

        teacher = build_teacher(LearningConfig(preset=None, dot_path=str(path)))

        assert len(teacher.target) == 3

    def test_predicate(self):
        teacher = build_teacher(LearningConfig(preset="tomita6", use_predicate_teacher=True,
                                               max_depth=5))

        assert isinstance(teacher, PredicateTeacher)
        assert teacher.oracle.max_depth == 5

    def test_predicate_requires_tomita(self):
        with pytest.raises(ValueError):
            build_teacher(LearningConfig(preset="even_zeros", use_predicate_teacher=True))

    def test_no_target(self):
        with pytest.raises(ValueError):
            build_teacher(LearningConfig(preset=None))


class TestMain:
    """Test end-to-end runs."""

    def test_important_events(self, capsys):
        assert main(["--preset", "three_states", "--strategy", "rivest-schapire"]) == 0

        out = capsys.readouterr().out
        assert 'A counterexample "010" is found.' in out
        assert "The result of MQ" not in out
        assert "L* Learning Summary" in out
        assert "__start0 -> s0;" in out

    def test_all_events_and_table(self, capsys):
        assert main(["--all-events", "--show-table"]) == 0

        out = capsys.readouterr().out
        assert 'The result of MQ("" + "") is true.' in out
        assert "ε" in out

    def test_dot_file(self, tmp_path, capsys):
        path = tmp_path / "target.dot"
        path.write_text(THREE_STATES_DOT)

        assert main(["--dot", str(path), "--strategy", "maler-pnueli"]) == 0
        assert "Learning is done." in capsys.readouterr().out

    def test_predicate_teacher(self, capsys):
        assert main(["--preset", "tomita4", "--predicate"]) == 0
        assert "Final DFA states: 4" in capsys.readouterr().out

    def test_compare(self, tmp_path, capsys):
        csv_path = tmp_path / "compare.csv"

        code = main(["--compare", "--presets", "even_zeros", "tomita3",
                     "--random", "2", "--random-states", "4", "--seed", "5",
                     "--csv", str(csv_path)])

        assert code == 0
        out = capsys.readouterr().out
        assert "STRATEGY COMPARISON" in out
        assert "rivest-schapire" in out
        assert csv_path.exists()

    def test_errors_return_nonzero(self, tmp_path, capsys):
        bad = tmp_path / "bad.dot"
        bad.write_text('digraph {\n  a -> b [label="xy"];\n}')

        assert main(["--preset", "tomita9"]) == 1
        assert main(["--dot", str(bad)]) == 1
        assert main(["--dot", str(tmp_path / "missing.dot")]) == 1
        assert capsys.readouterr().out.count("Error:") == 3
