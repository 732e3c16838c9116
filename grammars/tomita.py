"""
Tomita Grammars Implementation
Based on Tomita (1982) - classic benchmark grammars for grammatical inference

Each grammar is available both as a membership predicate (for PredicateTeacher)
and as the DOT text of its minimal DFA (for DFATeacher).
"""

from itertools import product
from typing import Callable, Tuple, List
import re

from core.dfa import DFA
from core.dot import decode


def tomita_1(word: str) -> bool:
    """
    Tomita Grammar 1: 1*
    Accepts strings containing only 1s (no 0s allowed).
    """
    return "0" not in word


def tomita_2(word: str) -> bool:
    """
    Tomita Grammar 2: (10)*
    Accepts strings that are repetitions of "10".
    """
    return word == "10" * (len(word) // 2)


# Not tomita 3: words containing an odd series of consecutive ones and then later an odd series of consecutive zeros
_not_tomita_3 = re.compile("((0|1)*0)*1(11)*(0(0|1)*1)*0(00)*(1(0|1)*)*$")


def tomita_3(w: str) -> bool:
    """
    Tomita Grammar 3: Complement of specific pattern
    Accepts strings that are NOT:
    - words containing an odd series of consecutive ones and then later an odd series of consecutive zeros
    """
    return _not_tomita_3.match(w) is None


def tomita_4(word: str) -> bool:
    """
    Tomita Grammar 4: No three consecutive 0s
    Accepts strings that don't contain "000".
    """
    return "000" not in word


def tomita_5(word: str) -> bool:
    """
    Tomita Grammar 5: Even 0s and even 1s
    Accepts strings with even count of both 0s and 1s.
    """
    return (word.count("0") % 2 == 0) and (word.count("1") % 2 == 0)


def tomita_6(word: str) -> bool:
    """
    Tomita Grammar 6: Difference of 0s and 1s divisible by 3
    Accepts strings where (#0s - #1s) mod 3 = 0.
    """
    return ((word.count("0") - word.count("1")) % 3) == 0


def tomita_7(word: str) -> bool:
    """
    Tomita Grammar 7: At most one occurrence of "10"
    Equivalent to 0*1*0*1*.
    """
    return word.count("10") <= 1


# Minimal DFAs, one DOT text per grammar
TOMITA_1_DOT = """
digraph tomita1 {
  __start0 [label="" shape="point"];
  ones [shape="doublecircle"];
  sink [shape="circle"];
  __start0 -> ones;
  ones -> ones [label="1"];
  ones -> sink [label="0"];
  sink -> sink [label="0,1"];
}
"""

TOMITA_2_DOT = """
digraph tomita2 {
  __start0 [label="" shape="point"];
  even [shape="doublecircle"];
  odd [shape="circle"];
  sink [shape="circle"];
  __start0 -> even;
  even -> odd [label="1"];
  even -> sink [label="0"];
  odd -> even [label="0"];
  odd -> sink [label="1"];
  sink -> sink [label="0,1"];
}
"""

# safe: no odd 1-run closed yet; odd_ones: inside an odd 1-run;
# odd_zeros: odd 0-run after an odd 1-run; even_zeros: armed but currently fine
TOMITA_3_DOT = """
digraph tomita3 {
  __start0 [label="" shape="point"];
  safe [shape="doublecircle"];
  odd_ones [shape="doublecircle"];
  odd_zeros [shape="circle"];
  even_zeros [shape="doublecircle"];
  sink [shape="circle"];
  __start0 -> safe;
  safe -> safe [label="0"];
  safe -> odd_ones [label="1"];
  odd_ones -> odd_zeros [label="0"];
  odd_ones -> safe [label="1"];
  odd_zeros -> even_zeros [label="0"];
  odd_zeros -> sink [label="1"];
  even_zeros -> odd_zeros [label="0"];
  even_zeros -> even_zeros [label="1"];
  sink -> sink [label="0,1"];
}
"""

TOMITA_4_DOT = """
digraph tomita4 {
  __start0 [label="" shape="point"];
  z0 [shape="doublecircle"];
  z1 [shape="doublecircle"];
  z2 [shape="doublecircle"];
  sink [shape="circle"];
  __start0 -> z0;
  z0 -> z1 [label="0"];
  z1 -> z2 [label="0"];
  z2 -> sink [label="0"];
  z0 -> z0 [label="1"];
  z1 -> z0 [label="1"];
  z2 -> z0 [label="1"];
  sink -> sink [label="0,1"];
}
"""

TOMITA_5_DOT = """
digraph tomita5 {
  __start0 [label="" shape="point"];
  ee [shape="doublecircle"];
  oe [shape="circle"];
  eo [shape="circle"];
  oo [shape="circle"];
  __start0 -> ee;
  ee -> oe [label="0"];
  ee -> eo [label="1"];
  oe -> ee [label="0"];
  oe -> oo [label="1"];
  eo -> oo [label="0"];
  eo -> ee [label="1"];
  oo -> eo [label="0"];
  oo -> oe [label="1"];
}
"""

TOMITA_6_DOT = """
digraph tomita6 {
  __start0 [label="" shape="point"];
  m0 [shape="doublecircle"];
  m1 [shape="circle"];
  m2 [shape="circle"];
  __start0 -> m0;
  m0 -> m1 [label="0"];
  m1 -> m2 [label="0"];
  m2 -> m0 [label="0"];
  m0 -> m2 [label="1"];
  m1 -> m0 [label="1"];
  m2 -> m1 [label="1"];
}
"""

TOMITA_7_DOT = """
digraph tomita7 {
  __start0 [label="" shape="point"];
  zeros1 [shape="doublecircle"];
  ones1 [shape="doublecircle"];
  zeros2 [shape="doublecircle"];
  ones2 [shape="doublecircle"];
  sink [shape="circle"];
  __start0 -> zeros1;
  zeros1 -> zeros1 [label="0"];
  zeros1 -> ones1 [label="1"];
  ones1 -> zeros2 [label="0"];
  ones1 -> ones1 [label="1"];
  zeros2 -> zeros2 [label="0"];
  zeros2 -> ones2 [label="1"];
  ones2 -> sink [label="0"];
  ones2 -> ones2 [label="1"];
  sink -> sink [label="0,1"];
}
"""

# Dictionary of all Tomita grammars
TOMITA_GRAMMARS = {
    1: (tomita_1, "1* (no zeros allowed)"),
    2: (tomita_2, "(10)* (alternating 10 pattern)"),
    3: (tomita_3, "complement of odd consecutive 1s then odd consecutive 0s"),
    4: (tomita_4, "no three consecutive 0s"),
    5: (tomita_5, "even 0s AND even 1s"),
    6: (tomita_6, "(#0s - #1s) mod 3 = 0"),
    7: (tomita_7, "at most one occurrence of '10'")
}

TOMITA_DOT = {
    1: TOMITA_1_DOT,
    2: TOMITA_2_DOT,
    3: TOMITA_3_DOT,
    4: TOMITA_4_DOT,
    5: TOMITA_5_DOT,
    6: TOMITA_6_DOT,
    7: TOMITA_7_DOT,
}

# Expected minimal DFA sizes
EXPECTED_STATES = {
    1: 2,  # 1*
    2: 3,  # (10)*
    3: 5,  # odd 0s after odd 1s
    4: 4,  # no 000
    5: 4,  # even 0s and 1s
    6: 3,  # (#0s - #1s) mod 3 = 0
    7: 5,  # 0*1*0*1*
}


def get_tomita_grammar(grammar_id: int) -> Tuple[Callable[[str], bool], str]:
    """
    Get Tomita grammar function and description by ID.

    Args:
        grammar_id: Grammar ID (1-7)

    Returns:
        Tuple of (grammar_function, description)
    """
    if grammar_id not in TOMITA_GRAMMARS:
        raise ValueError(f"Unknown Tomita grammar ID: {grammar_id}. Valid IDs are 1-7.")
    return TOMITA_GRAMMARS[grammar_id]


def get_tomita_dfa(grammar_id: int) -> DFA:
    """Minimal DFA of a Tomita grammar."""
    if grammar_id not in TOMITA_DOT:
        raise ValueError(f"Unknown Tomita grammar ID: {grammar_id}. Valid IDs are 1-7.")
    return decode(TOMITA_DOT[grammar_id])


def generate_binary_strings(max_length: int) -> List[str]:
    """
    Generate all binary strings up to max_length.

    Args:
        max_length: Maximum string length

    Returns:
        List of binary strings including empty string, shortest first
    """
    strings = ['']  # Include empty string
    for length in range(1, max_length + 1):
        strings.extend("".join(symbols) for symbols in product("01", repeat=length))
    return strings
