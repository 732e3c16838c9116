"""
Graphviz DOT codec for DFAs.

Only the line-oriented subset needed to describe an automaton is understood:

    digraph {
      __start0 [label="" shape="point"];
      s0 [shape="doublecircle" label="s0"];
      s1 [shape="circle" label="s1"];
      __start0 -> s0;
      s0 -> s1 [label="0"];
    }

Lines that are neither a start edge, a labeled edge nor a node statement are
ignored, so graph attributes and braces need no special handling.
"""

import logging
import re
from typing import Dict, List

from .dfa import DFA

logger = logging.getLogger(__name__)

START_NODE = "__start0"
ACCEPTING_SHAPE = "doublecircle"

# Names of DOT default-attribute statements, never states
_RESERVED_NAMES = {"node", "edge", "graph", "digraph", "subgraph"}

_NAME = r'"?(?P<{}>\w+)"?'
_PARAMS = r'\[(?P<params>(?:"[^"]*"|[^\]"])*)\]'

COMMENT_RE = re.compile(r"/\*(?:(?!\*/).)*\*/|//.*|^\s*#.*")
START_RE = re.compile(r"\b" + START_NODE + r"(?:_\w+)?\"?\s*->\s*" + _NAME.format("start_name"))
TRANSITION_RE = re.compile(
    _NAME.format("from_name") + r"\s*->\s*" + _NAME.format("to_name") + r"\s*" + _PARAMS
)
STATE_RE = re.compile(_NAME.format("name") + r"\s*" + _PARAMS)
LABEL_RE = re.compile(r'\blabel\s*=\s*(?P<value>"[^"]*"|[^\s\],;]*)')
SHAPE_RE = re.compile(r'\bshape\s*=\s*(?P<value>"[^"]*"|[^\s\],;]*)')


class DotFormatError(ValueError):
    """Raised when DOT text cannot be turned into an automaton."""


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def _extract(pattern: re.Pattern, params: str) -> str:
    match = pattern.search(params)
    if match is None:
        return ""
    return _strip_quotes(match.group("value"))


def _edge_symbols(label: str, line_number: int) -> List[str]:
    """Symbols named by an edge label; "0,1" labels one edge per symbol."""
    if len(label) == 1:
        return [label]
    symbols = label.split(",")
    if label and all(len(symbol) == 1 for symbol in symbols):
        return symbols
    raise DotFormatError(
        f"line {line_number}: edge label {label!r} is not a single symbol"
    )


def decode(text: str) -> DFA:
    """
    Parse DOT text into a DFA.

    Node names are mapped to dense ids in first-encounter order. The start
    state is the target of the __start0 edge, or id 0 without one. The
    alphabet is the sorted set of edge labels. When two edges share a source
    and a symbol, the last one wins.

    Args:
        text: DOT source

    Returns:
        Parsed DFA

    Raises:
        DotFormatError: If the text is not a string, declares no states, or
            has an edge whose label is not a symbol
    """
    if not isinstance(text, str):
        raise DotFormatError(f"expected DOT text, got {type(text).__name__}")

    name_to_state: Dict[str, int] = {}

    def state_of(name: str) -> int:
        if name not in name_to_state:
            name_to_state[name] = len(name_to_state)
        return name_to_state[name]

    start = None
    transitions: Dict[int, Dict[str, int]] = {}
    accepting = set()

    for line_number, raw_line in enumerate(text.split("\n"), start=1):
        line = COMMENT_RE.sub("", raw_line).strip()
        if not line:
            continue

        start_match = START_RE.search(line)
        if start_match is not None:
            start = state_of(start_match.group("start_name"))
            continue

        transition_match = TRANSITION_RE.search(line)
        if transition_match is not None:
            source = state_of(transition_match.group("from_name"))
            target = state_of(transition_match.group("to_name"))
            label = _extract(LABEL_RE, transition_match.group("params"))
            for symbol in _edge_symbols(label, line_number):
                successors = transitions.setdefault(source, {})
                if symbol in successors and successors[symbol] != target:
                    logger.debug("line %d overrides transition (%d, %r)",
                                 line_number, source, symbol)
                successors[symbol] = target
            continue

        state_match = STATE_RE.search(line)
        if state_match is not None:
            name = state_match.group("name")
            if name == START_NODE or name in _RESERVED_NAMES:
                continue
            state = state_of(name)
            if _extract(SHAPE_RE, state_match.group("params")) == ACCEPTING_SHAPE:
                accepting.add(state)

    if not name_to_state:
        raise DotFormatError("no states declared")

    alphabet = sorted({
        symbol for successors in transitions.values() for symbol in successors
    })

    return DFA(
        states=range(len(name_to_state)),
        alphabet=alphabet,
        transitions=transitions,
        initial_state=0 if start is None else start,
        final_states=accepting
    )


def encode(automaton: DFA) -> str:
    """
    Canonical DOT text for a DFA.

    One node line per state ordered by id, then the start edge, then one edge
    per (state, symbol) ordered by source id and alphabet order.
    """
    lines = ["digraph {", "  rankdir=LR;"]
    lines.append(f'  {START_NODE} [label="" shape="point"];')

    for state in sorted(automaton.states):
        shape = ACCEPTING_SHAPE if automaton.is_accepting(state) else "circle"
        lines.append(f'  s{state} [shape="{shape}" label="s{state}"];')
    lines.append(f"  {START_NODE} -> s{automaton.q0};")

    for state in sorted(automaton.states):
        successors = automaton.delta.get(state, {})
        for symbol in automaton.alphabet:
            if symbol in successors:
                lines.append(f'  s{state} -> s{successors[symbol]} [label="{symbol}"];')

    lines.append("}")
    return "\n".join(lines)
