"""Developer tools module for escapist.

This module provides performance benchmarking against the standard library's
escaping functions.
"""

from .benchmark import BenchmarkResult, BenchmarkSuite, EscapeBenchmark

__all__ = [
    "BenchmarkResult",
    "BenchmarkSuite",
    "EscapeBenchmark",
]
