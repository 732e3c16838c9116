"""
Preset target automata.

Every preset is DOT text accepted by core.dot.decode. The Tomita grammars are
included under the names tomita1 .. tomita7.
"""

from typing import Dict

from core.dfa import DFA
from core.dot import decode

from .tomita import TOMITA_DOT

# Even number of 0s
EVEN_ZEROS_DOT = """
digraph g {
  __start0 [label="" shape="none"]
  s1 [shape="doublecircle" label="s1"]
  s2 [shape="circle" label="s2"]
  __start0 -> s1
  s1 -> s2[label="0"]
  s1 -> s1[label="1"]
  s2 -> s1[label="0"]
  s2 -> s2[label="1"]
}
"""

# Needs one counterexample round to separate s2 from s1 and s3
THREE_STATES_DOT = """
digraph g {
  __start0 [label="" shape="none"]
  s1 [shape="doublecircle" label="s1"]
  s2 [shape="circle" label="s2"]
  s3 [shape="circle" label="s3"]
  __start0 -> s1
  s1 -> s2[label="0"]
  s1 -> s1[label="1"]
  s2 -> s1[label="0"]
  s2 -> s3[label="1"]
  s3 -> s2[label="0"]
  s3 -> s1[label="1"]
}
"""

# Binary numbers (most significant bit first) divisible by 3
DIVISIBLE_BY_3_DOT = """
digraph g {
  __start0 [label="" shape="point"];
  r0 [shape="doublecircle"];
  r1 [shape="circle"];
  r2 [shape="circle"];
  __start0 -> r0;
  r0 -> r0 [label="0"];
  r0 -> r1 [label="1"];
  r1 -> r2 [label="0"];
  r1 -> r0 [label="1"];
  r2 -> r1 [label="0"];
  r2 -> r2 [label="1"];
}
"""

# Words over a, b, c whose third symbol from the end is a
THIRD_FROM_END_DOT = """
digraph g {
  __start0 [label="" shape="point"];
  __start0 -> q000;
  q000 [shape="circle"];
  q001 [shape="circle"];
  q010 [shape="circle"];
  q011 [shape="circle"];
  q100 [shape="doublecircle"];
  q101 [shape="doublecircle"];
  q110 [shape="doublecircle"];
  q111 [shape="doublecircle"];
  q000 -> q001 [label="a"];
  q000 -> q000 [label="b,c"];
  q001 -> q011 [label="a"];
  q001 -> q010 [label="b,c"];
  q010 -> q101 [label="a"];
  q010 -> q100 [label="b,c"];
  q011 -> q111 [label="a"];
  q011 -> q110 [label="b,c"];
  q100 -> q001 [label="a"];
  q100 -> q000 [label="b,c"];
  q101 -> q011 [label="a"];
  q101 -> q010 [label="b,c"];
  q110 -> q101 [label="a"];
  q110 -> q100 [label="b,c"];
  q111 -> q111 [label="a"];
  q111 -> q110 [label="b,c"];
}
"""

PRESETS: Dict[str, str] = {
    "even_zeros": EVEN_ZEROS_DOT,
    "three_states": THREE_STATES_DOT,
    "divisible_by_3": DIVISIBLE_BY_3_DOT,
    "third_from_end": THIRD_FROM_END_DOT,
}
PRESETS.update({f"tomita{i}": dot for i, dot in TOMITA_DOT.items()})


def get_preset(name: str) -> DFA:
    """
    Decode a preset by name.

    Raises:
        ValueError: If the preset is unknown
    """
    if name not in PRESETS:
        raise ValueError(f"Unknown preset: {name}. Available presets: {sorted(PRESETS)}")
    return decode(PRESETS[name])
