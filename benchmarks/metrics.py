"""
Metrics collection and storage for benchmarking counterexample strategies.

This module provides metrics tracking for comparing how the three
counterexample processing strategies of L* spend membership and equivalence
queries on the same targets.
"""

import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from core.events import StepEvent


@dataclass
class LearningMetrics:
    """Metrics collected during a single learning run."""

    # Timing metrics
    total_time: float = 0.0

    # Query counts
    membership_queries: int = 0
    equivalence_queries: int = 0
    counterexamples_found: int = 0

    # Counterexample statistics
    counterexample_lengths: List[int] = field(default_factory=list)

    # Event counts
    events: int = 0
    important_events: int = 0

    # DFA properties
    num_states: int = 0
    expected_states: int = 0

    # Learning success: the learned DFA is equivalent to the target
    learning_successful: bool = False
    failure_reason: Optional[str] = None

    observation_table_size: Tuple[int, int, int] = (0, 0, 0)  # (|S|, |extensions|, |E|)

    @property
    def avg_counterexample_length(self) -> float:
        """Average length of counterexamples found."""
        if not self.counterexample_lengths:
            return 0.0
        return float(np.mean(self.counterexample_lengths))

    @property
    def queries_per_state(self) -> float:
        """Average number of membership queries per DFA state."""
        if self.num_states == 0:
            return 0.0
        return self.membership_queries / self.num_states


class MetricsCollector:
    """Collects metrics from the event stream of a learning run."""

    def __init__(self):
        self.metrics = LearningMetrics()
        self._start_time = None

    def start_learning(self):
        """Start timing the learning process."""
        self._start_time = time.time()
        self.metrics = LearningMetrics()

    def record_event(self, event: StepEvent):
        """Record one step event; counters are running totals."""
        self.metrics.events += 1
        if event.important:
            self.metrics.important_events += 1
        if event.counterexample is not None:
            self.record_counterexample(event.counterexample)

        self.metrics.membership_queries = event.counters.membership_queries
        self.metrics.equivalence_queries = event.counters.equivalence_queries
        self.metrics.observation_table_size = (
            len(event.table.states), len(event.table.extensions), len(event.table.separators)
        )

    def record_counterexample(self, counterexample: str):
        """Record a counterexample found."""
        self.metrics.counterexamples_found += 1
        self.metrics.counterexample_lengths.append(len(counterexample))

    def record_dfa_properties(self, num_states: int, expected_states: int = 0):
        """Record properties of the learned DFA."""
        self.metrics.num_states = num_states
        self.metrics.expected_states = expected_states

    def end_learning(self, successful: bool = True, failure_reason: str = None):
        """End the learning process and record final time."""
        if self._start_time:
            self.metrics.total_time = time.time() - self._start_time
        self.metrics.learning_successful = successful
        self.metrics.failure_reason = failure_reason

    def get_metrics(self) -> LearningMetrics:
        """Get the collected metrics."""
        return self.metrics


@dataclass
class BenchmarkResults:
    """Stores and analyzes results from multiple benchmark runs."""

    results: Dict[str, Dict[str, List[LearningMetrics]]] = field(default_factory=dict)
    # Structure: {target: {strategy: [metrics1, metrics2, ...]}}

    def add_result(self, target: str, strategy: str, metrics: LearningMetrics):
        """Add a benchmark result."""
        self.results.setdefault(target, {}).setdefault(strategy, []).append(metrics)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert results to a pandas DataFrame for analysis."""
        data = []
        for target, strategy_results in self.results.items():
            for strategy, metrics_list in strategy_results.items():
                for i, metrics in enumerate(metrics_list):
                    data.append({
                        'target': target,
                        'strategy': strategy,
                        'run': i,
                        'total_time': metrics.total_time,
                        'membership_queries': metrics.membership_queries,
                        'equivalence_queries': metrics.equivalence_queries,
                        'counterexamples': metrics.counterexamples_found,
                        'avg_counterexample_length': metrics.avg_counterexample_length,
                        'num_states': metrics.num_states,
                        'expected_states': metrics.expected_states,
                        'learning_successful': metrics.learning_successful,
                        'queries_per_state': metrics.queries_per_state,
                        'events': metrics.events,
                        'important_events': metrics.important_events,
                        'obs_table_s': metrics.observation_table_size[0],
                        'obs_table_x': metrics.observation_table_size[1],
                        'obs_table_e': metrics.observation_table_size[2],
                    })

        return pd.DataFrame(data)

    def summary(self) -> pd.DataFrame:
        """Mean query counts per strategy, across targets and runs."""
        df = self.to_dataframe()
        if df.empty:
            return df
        return (
            df.groupby('strategy')[['membership_queries', 'equivalence_queries',
                                    'counterexamples', 'learning_successful']]
            .mean()
            .sort_values('membership_queries')
        )

    def save_csv(self, path):
        """Write the per-run table as CSV."""
        self.to_dataframe().to_csv(path, index=False)
