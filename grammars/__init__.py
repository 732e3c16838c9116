"""Target languages for L* experiments."""

from .tomita import (
    tomita_1, tomita_2, tomita_3, tomita_4,
    tomita_5, tomita_6, tomita_7,
    TOMITA_GRAMMARS,
    TOMITA_DOT,
    EXPECTED_STATES,
    get_tomita_grammar,
    get_tomita_dfa,
    generate_binary_strings
)
from .presets import PRESETS, get_preset

__all__ = [
    'tomita_1', 'tomita_2', 'tomita_3', 'tomita_4',
    'tomita_5', 'tomita_6', 'tomita_7',
    'TOMITA_GRAMMARS',
    'TOMITA_DOT',
    'EXPECTED_STATES',
    'get_tomita_grammar',
    'get_tomita_dfa',
    'generate_binary_strings',
    'PRESETS',
    'get_preset',
]
