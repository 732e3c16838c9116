"""
Configuration for L* learning runs.

This module provides a unified description of one learning run (which target,
which counterexample strategy, how events are observed) for the command line
and for benchmarking.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from counterexample import CounterexampleStrategy


@dataclass
class LearningConfig:
    """Configuration for a single learning run."""

    strategy: CounterexampleStrategy = CounterexampleStrategy.ANGLUIN

    # Target: a preset name or a path to a DOT file (preset wins if both set)
    preset: Optional[str] = "even_zeros"
    dot_path: Optional[str] = None

    # Predicate teacher parameters (Tomita predicates instead of DFAs)
    use_predicate_teacher: bool = False
    max_depth: int = 8

    # Event observation
    important_only: bool = True
    show_table: bool = False

    # Random target parameters
    random_states: int = 5
    random_alphabet_size: int = 2
    random_accepting_ratio: float = 0.3
    seed: Optional[int] = None

    def __post_init__(self):
        self.strategy = CounterexampleStrategy.parse(self.strategy)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for serialization."""
        result = {
            'strategy': self.strategy.value,
            'important_only': self.important_only,
        }

        if self.preset is not None:
            result['preset'] = self.preset
        elif self.dot_path is not None:
            result['dot_path'] = self.dot_path

        if self.use_predicate_teacher:
            result['max_depth'] = self.max_depth

        if self.seed is not None:
            result.update({
                'random_states': self.random_states,
                'random_alphabet_size': self.random_alphabet_size,
                'random_accepting_ratio': self.random_accepting_ratio,
                'seed': self.seed,
            })

        return result


def get_default_configs(preset: str = "even_zeros") -> Dict[str, LearningConfig]:
    """Get one default configuration per counterexample strategy."""
    return {
        strategy.value: LearningConfig(strategy=strategy, preset=preset)
        for strategy in CounterexampleStrategy
    }


def strategy_names() -> List[str]:
    return [strategy.value for strategy in CounterexampleStrategy]
