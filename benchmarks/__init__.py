"""
Benchmarking framework for comparing counterexample processing strategies
in L* learning.
"""

from .benchmark_runner import BenchmarkRunner
from .metrics import MetricsCollector, BenchmarkResults, LearningMetrics
from .learning_config import LearningConfig, get_default_configs
from .random_dfa import RandomDFAGenerator, generate_random_dfas

__all__ = [
    "BenchmarkRunner",
    "MetricsCollector",
    "BenchmarkResults",
    "LearningMetrics",
    "LearningConfig",
    "get_default_configs",
    "RandomDFAGenerator",
    "generate_random_dfas",
]
