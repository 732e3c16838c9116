"""Tests for the Tomita grammars and preset targets."""

import pytest

from grammars import (
    EXPECTED_STATES,
    PRESETS,
    TOMITA_GRAMMARS,
    generate_binary_strings,
    get_preset,
    get_tomita_dfa,
    get_tomita_grammar,
)


@pytest.mark.parametrize("grammar_id", sorted(TOMITA_GRAMMARS))
def test_dfa_matches_predicate(grammar_id):
    predicate, _ = get_tomita_grammar(grammar_id)
    dfa = get_tomita_dfa(grammar_id)

    for word in generate_binary_strings(8):
        assert dfa.accepts(word) == predicate(word), word


@pytest.mark.parametrize("grammar_id", sorted(TOMITA_GRAMMARS))
def test_dfa_is_minimal_and_total(grammar_id):
    dfa = get_tomita_dfa(grammar_id)

    assert dfa.is_total()
    assert len(dfa) == EXPECTED_STATES[grammar_id]
    assert len(dfa.minimize()) == EXPECTED_STATES[grammar_id]


@pytest.mark.parametrize("word, expected", [
    ("", True),
    ("1", True),
    ("10", False),
    ("100", True),
    ("1000", False),
    ("11100", True),
    ("0110", True),
    ("101", False),
])
def test_tomita_3(word, expected):
    predicate, _ = get_tomita_grammar(3)

    assert predicate(word) is expected


def test_generate_binary_strings():
    strings = generate_binary_strings(2)

    assert strings == ["", "0", "1", "00", "01", "10", "11"]
    assert len(generate_binary_strings(8)) == 2 ** 9 - 1


def test_unknown_grammar():
    with pytest.raises(ValueError):
        get_tomita_grammar(8)
    with pytest.raises(ValueError):
        get_tomita_dfa(0)


class TestPresets:
    """Test the named preset targets."""

    @pytest.mark.parametrize("name", sorted(PRESETS))
    def test_preset_is_total(self, name):
        assert get_preset(name).is_total()

    def test_third_from_end(self):
        dfa = get_preset("third_from_end")

        assert dfa.alphabet == ["a", "b", "c"]
        assert len(dfa.minimize()) == 8
        assert dfa.accepts("abb")
        assert dfa.accepts("cbacc")
        assert not dfa.accepts("ab")
        assert not dfa.accepts("abbb")

    def test_divisible_by_3(self):
        dfa = get_preset("divisible_by_3")

        for n in range(64):
            assert dfa.accepts(format(n, "b")) == (n % 3 == 0)

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Available presets"):
            get_preset("tomita8")
