"""
Benchmark runner for comparing counterexample processing strategies.

This module runs L* with each strategy over a set of target DFAs, drives the
learning sessions event by event and collects metrics for every run.
"""

import logging
from typing import Dict, Iterable, List, Optional, Union

from core.dfa import DFA
from core.session import LearningSession
from counterexample import CounterexampleStrategy
from grammars.presets import PRESETS, get_preset
from teacher.teacher import DFATeacher

from .metrics import BenchmarkResults, LearningMetrics, MetricsCollector
from .random_dfa import RandomDFAGenerator

logger = logging.getLogger(__name__)


class BenchmarkRunner:
    """Orchestrates benchmark execution across strategies and targets."""

    def __init__(self, strategies: Optional[Iterable[Union[str, CounterexampleStrategy]]] = None):
        """
        Initialize benchmark runner.

        Args:
            strategies: Strategies to compare (default: all three)
        """
        if strategies is None:
            strategies = list(CounterexampleStrategy)
        self.strategies: List[CounterexampleStrategy] = [
            CounterexampleStrategy.parse(s) for s in strategies
        ]
        self.results = BenchmarkResults()

    def run_single(self, target: DFA,
                   strategy: Union[str, CounterexampleStrategy]) -> LearningMetrics:
        """
        Learn one target with one strategy.

        Args:
            target: Target DFA (answered exactly by a DFATeacher)
            strategy: Counterexample processing strategy

        Returns:
            Metrics of the run
        """
        collector = MetricsCollector()
        collector.start_learning()

        session = LearningSession(DFATeacher(target), strategy)
        for event in session:
            collector.record_event(event)

        learned = session.result
        expected = len(target.minimize())
        collector.record_dfa_properties(len(learned), expected)

        if learned.equivalence(target) is True:
            collector.end_learning(successful=True)
        else:
            collector.end_learning(successful=False,
                                   failure_reason="learned DFA differs from target")
        return collector.get_metrics()

    def run_benchmark(self, targets: Dict[str, DFA], num_runs: int = 1) -> BenchmarkResults:
        """
        Run every strategy on every target.

        Args:
            targets: Target name → DFA
            num_runs: Repetitions per (target, strategy)

        Returns:
            Accumulated results
        """
        for name, target in targets.items():
            for strategy in self.strategies:
                for run in range(num_runs):
                    metrics = self.run_single(target, strategy)
                    logger.info("%s / %s run %d: %d MQs, %d EQs, %d states",
                                name, strategy.value, run, metrics.membership_queries,
                                metrics.equivalence_queries, metrics.num_states)
                    self.results.add_result(name, strategy.value, metrics)
        return self.results

    def run_presets(self, names: Optional[Iterable[str]] = None,
                    num_runs: int = 1) -> BenchmarkResults:
        """Run the benchmark over preset targets (default: all presets)."""
        names = sorted(PRESETS) if names is None else list(names)
        return self.run_benchmark({name: get_preset(name) for name in names}, num_runs)

    def run_random(self, count: int, num_states: int, alphabet_size: int = 2,
                   accepting_ratio: float = 0.3, seed: Optional[int] = None) -> BenchmarkResults:
        """Run the benchmark over freshly generated random targets."""
        generator = RandomDFAGenerator(alphabet_size, seed=seed)
        targets = {
            f"random_{num_states}s_{i}": generator.generate_random_dfa(num_states, accepting_ratio)
            for i in range(count)
        }
        return self.run_benchmark(targets)
