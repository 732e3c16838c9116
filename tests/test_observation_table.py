"""Tests for the observation table."""

import pytest

from core.observation_table import ObservationTable, TableInvariantError, encode_row


def fill(table, rows, kind="states"):
    """Insert rows directly, bypassing the learner."""
    insert = table.insert_state if kind == "states" else table.insert_extension
    for prefix, values in rows.items():
        insert(prefix).extend(values)


@pytest.fixture
def even_zeros_table():
    """Closed and consistent table for the even-zeros language."""
    table = ObservationTable(["0", "1"])
    table.insert_separator("")
    fill(table, {"": [True], "0": [False]})
    fill(table, {"1": [True], "00": [True], "01": [False]}, kind="extensions")
    return table


class TestGuards:
    """Test duplicate insertion guards."""

    def test_duplicate_state(self, even_zeros_table):
        with pytest.raises(TableInvariantError):
            even_zeros_table.insert_state("0")

    def test_state_already_an_extension(self, even_zeros_table):
        with pytest.raises(TableInvariantError):
            even_zeros_table.insert_state("01")

    def test_extension_already_a_state(self, even_zeros_table):
        with pytest.raises(TableInvariantError):
            even_zeros_table.insert_extension("")

    def test_duplicate_separator(self, even_zeros_table):
        with pytest.raises(TableInvariantError):
            even_zeros_table.insert_separator("")

    def test_promote_unknown_prefix(self, even_zeros_table):
        with pytest.raises(TableInvariantError):
            even_zeros_table.move_to_states("0")

    def test_promote_keeps_row(self, even_zeros_table):
        row = even_zeros_table.move_to_states("01")

        assert row == [False]
        assert "01" in even_zeros_table.states
        assert "01" not in even_zeros_table.extensions
        assert even_zeros_table.missing_extensions("01") == ["010", "011"]


class TestClosedAndConsistent:
    """Test closedness and consistency checks."""

    def test_closed_and_consistent(self, even_zeros_table):
        assert even_zeros_table.is_closed()
        assert even_zeros_table.is_consistent()

    def test_unclosed_row(self):
        table = ObservationTable(["0", "1"])
        table.insert_separator("")
        fill(table, {"": [True]})
        fill(table, {"0": [False], "1": [True]}, kind="extensions")

        assert table.find_unclosed_row() == "0"
        assert not table.is_closed()

    def test_inconsistency_yields_symbol_plus_separator(self):
        table = ObservationTable(["a"])
        table.insert_separator("")
        fill(table, {"": [False], "a": [False]})
        fill(table, {"aa": [True]}, kind="extensions")

        assert table.find_inconsistency() == "a"
        assert not table.is_consistent()

    def test_inconsistency_uses_differing_column(self):
        table = ObservationTable(["a"])
        table.insert_separator("")
        table.insert_separator("a")
        fill(table, {"": [False, False], "a": [False, False]})
        fill(table, {"aa": [False, True]}, kind="extensions")

        assert table.find_inconsistency() == "aa"


class TestHypothesis:
    """Test hypothesis synthesis."""

    def test_make_hypothesis(self, even_zeros_table, even_zeros):
        hypothesis, access_strings = even_zeros_table.make_hypothesis()

        assert hypothesis == even_zeros
        assert access_strings == {0: "", 1: "0"}

    def test_equal_rows_share_a_state(self):
        table = ObservationTable(["0", "1"])
        table.insert_separator("")
        fill(table, {"": [True], "0": [False], "00": [True]})
        fill(table, {"1": [True], "01": [False], "000": [False], "001": [True]},
             kind="extensions")

        hypothesis, access_strings = table.make_hypothesis()

        assert len(hypothesis) == 2
        assert access_strings == {0: "", 1: "0"}
        assert hypothesis.accepts("00")
        assert not hypothesis.accepts("000")


class TestSnapshot:
    """Test frozen copies of the table."""

    def test_snapshot_is_detached(self, even_zeros_table):
        snapshot = even_zeros_table.snapshot()

        even_zeros_table.move_to_states("01")
        even_zeros_table.insert_separator("0")

        assert snapshot.separators == ("",)
        assert list(snapshot.states) == ["", "0"]
        assert "01" in snapshot.extensions

    def test_snapshot_is_read_only(self, even_zeros_table):
        snapshot = even_zeros_table.snapshot()

        with pytest.raises(TypeError):
            snapshot.states["x"] = (True,)
        assert snapshot.row("1") == (True,)

    def test_render(self, even_zeros_table):
        text = str(even_zeros_table.snapshot())

        assert "ε" in text
        assert text == str(even_zeros_table)

    def test_statistics(self, even_zeros_table):
        assert even_zeros_table.get_statistics() == {
            "states": 2, "extensions": 3, "separators": 1, "cells": 5,
        }

    def test_encode_row(self):
        assert encode_row([True, False, True]) == "101"
