#!/usr/bin/env python
"""
Command-line entry point for L* learning.

Learns a target automaton step by step and prints the events, or compares the
counterexample processing strategies on several targets.

Usage:
    python run_lstar.py --preset tomita3 --strategy rivest-schapire
    python run_lstar.py --dot target.dot --all-events --show-table
    python run_lstar.py --compare --presets tomita1 tomita5 --random 5 --random-states 6
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from benchmarks.benchmark_runner import BenchmarkRunner
from benchmarks.learning_config import LearningConfig, strategy_names
from core.dot import DotFormatError, decode
from core.session import LearningSession
from grammars.presets import PRESETS, get_preset
from grammars.tomita import get_tomita_grammar
from teacher.teacher import DFATeacher, PredicateTeacher


def print_header(title: str):
    """Print a section header."""
    print("=" * 70)
    print(title)
    print("=" * 70)


def build_teacher(config: LearningConfig):
    """
    Create the teacher described by a configuration.

    Raises:
        DotFormatError: If the DOT file cannot be parsed
        ValueError: If the preset is unknown or no target is configured
    """
    if config.use_predicate_teacher:
        if config.preset is None or not config.preset.startswith("tomita"):
            raise ValueError("Predicate teachers are only available for tomita presets")
        predicate, _ = get_tomita_grammar(int(config.preset[len("tomita"):]))
        return PredicateTeacher(["0", "1"], predicate, max_depth=config.max_depth)

    if config.preset is not None:
        return DFATeacher(get_preset(config.preset))
    if config.dot_path is not None:
        return DFATeacher(decode(Path(config.dot_path).read_text()))
    raise ValueError("No target configured: give a preset or a DOT file")


def learn_target(config: LearningConfig, interval: float = 0.0) -> int:
    """Run one session, printing events at the configured granularity."""
    teacher = build_teacher(config)
    session = LearningSession(teacher, config.strategy)

    print_header(f"L* with {config.strategy.value} counterexample processing")
    while True:
        event = session.advance() if config.important_only else session.step()
        if event is None:
            break
        print(f"[{event.counters.membership_queries:>5} MQ {event.counters.equivalence_queries:>3} EQ] "
              f"{event.message}")
        if config.show_table and event.important:
            print(event.table)
            print()
        if interval > 0:
            time.sleep(interval)

    session.learner.print_summary()
    print("\nLearned automaton:")
    print(session.result.to_dot())
    return 0


def compare_strategies(presets: List[str], random_count: int, random_states: int,
                       random_alphabet_size: int, seed: Optional[int],
                       strategies: Optional[List[str]], csv_path: Optional[str]) -> int:
    """Run every strategy over the selected targets and print a summary."""
    runner = BenchmarkRunner(strategies)
    if presets:
        runner.run_presets(presets)
    if random_count > 0:
        runner.run_random(random_count, random_states, random_alphabet_size, seed=seed)

    df = runner.results.to_dataframe()
    if df.empty:
        print("Error: No targets selected")
        return 1

    print_header("STRATEGY COMPARISON")
    columns = ['target', 'strategy', 'membership_queries', 'equivalence_queries',
               'num_states', 'expected_states', 'learning_successful']
    print(df[columns].to_string(index=False))
    print("\nMean per strategy:")
    print(runner.results.summary().to_string())

    if csv_path:
        runner.results.save_csv(csv_path)
        print(f"\nResults saved to: {csv_path}")

    return 0 if bool(df['learning_successful'].all()) else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with command line interface."""
    parser = argparse.ArgumentParser(
        description="Step-by-step L* automata learning",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"Presets: {', '.join(sorted(PRESETS))}"
    )

    # Target selection
    parser.add_argument('--preset', default=None,
                        help='Preset target automaton (default: even_zeros)')
    parser.add_argument('--dot', default=None,
                        help='Path to a DOT file describing the target automaton')
    parser.add_argument('--predicate', action='store_true',
                        help='Answer queries from the Tomita predicate with a bounded BFS oracle')
    parser.add_argument('--max-depth', type=int, default=8,
                        help='Depth bound of the BFS oracle (default: 8)')

    # Learning configuration
    parser.add_argument('--strategy', choices=strategy_names(), default='angluin',
                        help='Counterexample processing strategy (default: angluin)')

    # Event display
    parser.add_argument('--all-events', action='store_true',
                        help='Print every event, not only important ones')
    parser.add_argument('--show-table', action='store_true',
                        help='Print the observation table after important events')
    parser.add_argument('--interval', type=float, default=0.0,
                        help='Seconds to wait between printed events (default: 0)')

    # Strategy comparison
    parser.add_argument('--compare', action='store_true',
                        help='Compare strategies instead of learning one target')
    parser.add_argument('--presets', nargs='*', default=None,
                        help='Presets to compare on (default: all)')
    parser.add_argument('--strategies', nargs='+', choices=strategy_names(), default=None,
                        help='Strategies to compare (default: all)')
    parser.add_argument('--random', type=int, default=0,
                        help='Number of random targets to add to the comparison')
    parser.add_argument('--random-states', type=int, default=5)
    parser.add_argument('--random-alphabet-size', type=int, default=2)
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--csv', default=None,
                        help='Write comparison results to this CSV file')

    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    parser.add_argument('--verbose', action='store_true',
                        help='Print tracebacks on errors')

    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        if args.compare:
            presets = sorted(PRESETS) if args.presets is None else args.presets
            return compare_strategies(presets, args.random, args.random_states,
                                      args.random_alphabet_size, args.seed,
                                      args.strategies, args.csv)

        preset = args.preset
        if preset is None and args.dot is None:
            preset = "even_zeros"
        config = LearningConfig(
            strategy=args.strategy,
            preset=preset,
            dot_path=args.dot,
            use_predicate_teacher=args.predicate,
            max_depth=args.max_depth,
            important_only=not args.all_events,
            show_table=args.show_table,
        )
        return learn_target(config, interval=args.interval)

    except KeyboardInterrupt:
        print("\n\nLearning interrupted by user.")
        return 1
    except (DotFormatError, ValueError, OSError) as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
