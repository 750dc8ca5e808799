"""Performance benchmarking for escapist.

This module times escapist's escapers against their standard library
counterparts over a fixed set of inputs, and compares benchmark suites to
track performance regressions over time.
"""

import gc
import html
import json
import statistics
import time
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import quote

import psutil

from escapist.csv import escape_csv
from escapist.html import escape_html5, unescape_html
from escapist.json import escape_json
from escapist.properties import escape_properties_value
from escapist.shared import get_logger
from escapist.uri import escape_uri_path_segment, unescape_uri_path_segment

Escaper = Callable[[str], Any]

ESCAPISTS: Dict[str, Escaper] = {
    "escapist.escape_html5": escape_html5,
    "escapist.unescape_html": unescape_html,
    "escapist.escape_uri_path_segment": escape_uri_path_segment,
    "escapist.unescape_uri_path_segment": unescape_uri_path_segment,
    "escapist.escape_json": escape_json,
    "escapist.escape_properties_value": escape_properties_value,
    "escapist.escape_csv": escape_csv,
}

# Standard library counterpart of each escapist function, where one exists
BASELINES: Dict[str, Escaper] = {
    "html.escape": html.escape,
    "html.unescape": html.unescape,
    "urllib.parse.quote": partial(quote, safe="!$&'()*+,;=:@-._~"),
    "json.dumps": json.dumps,
}

COUNTERPARTS: Dict[str, str] = {
    "escapist.escape_html5": "html.escape",
    "escapist.unescape_html": "html.unescape",
    "escapist.escape_uri_path_segment": "urllib.parse.quote",
    "escapist.escape_json": "json.dumps",
}


@dataclass
class BenchmarkResult:
    """Result of a single benchmark run."""

    escaper_name: str
    test_case: str
    processing_time_ms: float
    memory_used_mb: float
    characters_processed: int
    output_length: int
    success: bool
    error_message: Optional[str] = None

    @property
    def characters_per_second(self) -> float:
        """Calculate characters processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.characters_processed * 1000.0) / self.processing_time_ms

    @property
    def expansion_ratio(self) -> float:
        """Output length relative to input length."""
        if self.characters_processed <= 0:
            return 0.0
        return self.output_length / self.characters_processed

    @property
    def memory_per_character(self) -> float:
        """Calculate memory usage per character."""
        if self.characters_processed <= 0:
            return 0.0
        return (self.memory_used_mb * 1024 * 1024) / self.characters_processed


@dataclass
class BenchmarkSuite:
    """Collection of benchmark results with statistical analysis."""

    results: List[BenchmarkResult] = field(default_factory=list)
    suite_name: str = "Escape Benchmark"
    timestamp: float = field(default_factory=time.time)

    def add_result(self, result: BenchmarkResult) -> None:
        self.results.append(result)

    def get_results_by_escaper(self, escaper_name: str) -> List[BenchmarkResult]:
        return [r for r in self.results if r.escaper_name == escaper_name]

    def get_results_by_test_case(self, test_case: str) -> List[BenchmarkResult]:
        return [r for r in self.results if r.test_case == test_case]

    def get_statistics(self, escaper_name: str, metric: str) -> Dict[str, float]:
        """Get statistical analysis for an escaper and metric.

        Args:
            escaper_name: Name the escaper was benchmarked under
            metric: Any numeric field or property of BenchmarkResult

        Returns:
            min/max/mean/median/stdev/count, or an empty dict if there is no data
        """
        values = [
            float(getattr(result, metric))
            for result in self.get_results_by_escaper(escaper_name)
            if hasattr(result, metric)
        ]
        if not values:
            return {}

        return {
            "min": min(values),
            "max": max(values),
            "mean": statistics.mean(values),
            "median": statistics.median(values),
            "stdev": statistics.stdev(values) if len(values) > 1 else 0.0,
            "count": len(values),
        }

    def generate_report(self) -> Dict[str, Any]:
        """Generate benchmark report with per-escaper summaries."""
        escapers = sorted(set(r.escaper_name for r in self.results))
        test_cases = sorted(set(r.test_case for r in self.results))

        report: Dict[str, Any] = {
            "suite_name": self.suite_name,
            "timestamp": self.timestamp,
            "total_results": len(self.results),
            "escapers": escapers,
            "test_cases": test_cases,
            "summary": {},
            "detailed_results": {},
        }

        for escaper in escapers:
            escaper_results = self.get_results_by_escaper(escaper)
            successful_results = [r for r in escaper_results if r.success]
            report["summary"][escaper] = {
                "total_runs": len(escaper_results),
                "successful_runs": len(successful_results),
                "success_rate": len(successful_results) / len(escaper_results),
                "performance": self.get_statistics(escaper, "characters_per_second"),
                "memory": self.get_statistics(escaper, "memory_used_mb"),
            }

        for test_case in test_cases:
            report["detailed_results"][test_case] = {
                result.escaper_name: {
                    "processing_time_ms": result.processing_time_ms,
                    "memory_used_mb": result.memory_used_mb,
                    "characters_per_second": result.characters_per_second,
                    "expansion_ratio": result.expansion_ratio,
                    "success": result.success,
                    "error": result.error_message,
                }
                for result in self.get_results_by_test_case(test_case)
            }

        return report


class EscapeBenchmark:
    """Escaping performance benchmark."""

    def __init__(
        self,
        correlation_id: Optional[str] = None,
        warmup_runs: int = 3,
        benchmark_runs: int = 10,
        iterations: int = 100,
    ) -> None:
        """Initialize benchmark.

        Args:
            correlation_id: Optional correlation ID for tracking
            warmup_runs: Number of warmup runs before benchmarking
            benchmark_runs: Number of benchmark runs to average
            iterations: Calls of the escaper per timed run
        """
        self.correlation_id = correlation_id
        self.warmup_runs = warmup_runs
        self.benchmark_runs = benchmark_runs
        self.iterations = iterations
        self.logger = get_logger(__name__, correlation_id, "benchmark")
        self.test_cases = self._create_test_cases()

    def _create_test_cases(self) -> Dict[str, str]:
        """Create test cases for benchmarking."""
        return {
            "plain_ascii": "The quick brown fox jumps over the lazy dog " * 20,
            "markup": '<a href="/search?q=x&amp;page=2" title=\'Tom & Jerry\'>link</a>' * 10,
            "non_ascii": "Café crème brûlée, à la carte \U0001F600 " * 20,
            "uri_components": "users list/café?x=1&y=a+b#frag " * 20,
            "large_mixed": self._generate_large_text(),
        }

    def _generate_large_text(self) -> str:
        lines = []
        for i in range(500):
            lines.append(
                f'row {i}: name="item {i}", price={i * 3}€, tags=<b>&</b>, '
                f"path=/items/{i}/café\táéí"
            )
        return "\n".join(lines)

    def _measure_memory_usage(self) -> float:
        """Get current memory usage in MB."""
        process = psutil.Process()
        return process.memory_info().rss / 1024 / 1024

    def _benchmark_escaper(
        self, escaper_name: str, escaper: Escaper, test_case: str, text: str
    ) -> BenchmarkResult:
        gc.collect()
        memory_before = self._measure_memory_usage()
        start_time = time.perf_counter()

        output: Any = None
        try:
            for _ in range(self.iterations):
                output = escaper(text)
            success = True
            error_message = None
        except Exception as e:
            success = False
            error_message = str(e)

        processing_time = (time.perf_counter() - start_time) * 1000 / self.iterations
        memory_after = self._measure_memory_usage()

        return BenchmarkResult(
            escaper_name=escaper_name,
            test_case=test_case,
            processing_time_ms=processing_time,
            memory_used_mb=max(0.0, memory_after - memory_before),
            characters_processed=len(text),
            output_length=len(output) if isinstance(output, str) else 0,
            success=success,
            error_message=error_message,
        )

    def run_benchmark(
        self,
        include_baselines: bool = True,
        escapers: Optional[Dict[str, Escaper]] = None,
    ) -> BenchmarkSuite:
        """Run benchmark suite.

        Args:
            include_baselines: Also time the standard library counterparts
            escapers: Escapers to time instead of the default escapist set

        Returns:
            BenchmarkSuite with one averaged result per escaper and test case
        """
        suite = BenchmarkSuite(suite_name="Escape Performance Benchmark")

        to_test = dict(escapers if escapers is not None else ESCAPISTS)
        if include_baselines:
            to_test.update(BASELINES)

        self.logger.info(
            "Starting benchmark suite",
            extra={
                "test_cases": len(self.test_cases),
                "escapers": list(to_test),
                "warmup_runs": self.warmup_runs,
                "benchmark_runs": self.benchmark_runs,
            },
        )

        for test_case, text in self.test_cases.items():
            self.logger.info(f"Benchmarking test case: {test_case}")

            for escaper_name, escaper in to_test.items():
                self.logger.debug(f"Testing escaper: {escaper_name}")

                for _ in range(self.warmup_runs):
                    self._benchmark_escaper(escaper_name, escaper, test_case, text)

                run_results = [
                    self._benchmark_escaper(escaper_name, escaper, test_case, text)
                    for _ in range(self.benchmark_runs)
                ]
                suite.add_result(self._average(escaper_name, test_case, text, run_results))

        self.logger.info(
            "Benchmark suite completed",
            extra={
                "total_results": len(suite.results),
                "suite_duration_minutes": (time.time() - suite.timestamp) / 60,
            },
        )

        return suite

    def _average(
        self,
        escaper_name: str,
        test_case: str,
        text: str,
        run_results: List[BenchmarkResult],
    ) -> BenchmarkResult:
        successful_runs = [r for r in run_results if r.success]
        if not successful_runs:
            return BenchmarkResult(
                escaper_name=escaper_name,
                test_case=test_case,
                processing_time_ms=0.0,
                memory_used_mb=0.0,
                characters_processed=len(text),
                output_length=0,
                success=False,
                error_message=run_results[0].error_message if run_results else None,
            )
        return BenchmarkResult(
            escaper_name=escaper_name,
            test_case=test_case,
            processing_time_ms=statistics.mean(r.processing_time_ms for r in successful_runs),
            memory_used_mb=statistics.mean(r.memory_used_mb for r in successful_runs),
            characters_processed=len(text),
            output_length=successful_runs[0].output_length,
            success=True,
        )

    def relative_speed(self, suite: BenchmarkSuite) -> Dict[str, float]:
        """Ratio of each escapist function's time to its standard library counterpart.

        Values below 1.0 mean escapist was faster.
        """
        ratios: Dict[str, float] = {}
        for escapist_name, baseline_name in COUNTERPARTS.items():
            for result in suite.get_results_by_escaper(escapist_name):
                baseline = next(
                    (
                        r
                        for r in suite.get_results_by_test_case(result.test_case)
                        if r.escaper_name == baseline_name
                    ),
                    None,
                )
                if baseline and baseline.success and result.success and baseline.processing_time_ms > 0:
                    ratios[f"{escapist_name}_{result.test_case}"] = (
                        result.processing_time_ms / baseline.processing_time_ms
                    )
        return ratios

    def compare_performance(
        self,
        baseline_suite: BenchmarkSuite,
        current_suite: BenchmarkSuite,
        threshold: float = 0.05,
    ) -> Dict[str, Any]:
        """Compare performance between two benchmark suites.

        Args:
            baseline_suite: Baseline benchmark results
            current_suite: Current benchmark results
            threshold: Relative time change counted as an improvement or regression

        Returns:
            Performance comparison report
        """
        comparison: Dict[str, Any] = {
            "baseline_timestamp": baseline_suite.timestamp,
            "current_timestamp": current_suite.timestamp,
            "improvements": {},
            "regressions": {},
            "summary": {},
        }

        for baseline_result in baseline_suite.results:
            current_result = next(
                (
                    r
                    for r in current_suite.get_results_by_test_case(baseline_result.test_case)
                    if r.escaper_name == baseline_result.escaper_name
                ),
                None,
            )
            if not (current_result and baseline_result.success and current_result.success):
                continue
            if baseline_result.processing_time_ms <= 0:
                continue

            time_change = (
                (current_result.processing_time_ms - baseline_result.processing_time_ms)
                / baseline_result.processing_time_ms
            )
            memory_change = (
                (current_result.memory_used_mb - baseline_result.memory_used_mb)
                / baseline_result.memory_used_mb
                if baseline_result.memory_used_mb > 0 else 0
            )

            key = f"{baseline_result.escaper_name}_{baseline_result.test_case}"
            entry = {
                "memory_change_percent": memory_change * 100,
                "baseline_time_ms": baseline_result.processing_time_ms,
                "current_time_ms": current_result.processing_time_ms,
            }
            if time_change < -threshold:
                comparison["improvements"][key] = {
                    "time_improvement_percent": abs(time_change) * 100, **entry
                }
            elif time_change > threshold:
                comparison["regressions"][key] = {
                    "time_regression_percent": time_change * 100, **entry
                }

        comparison["summary"] = {
            "total_improvements": len(comparison["improvements"]),
            "total_regressions": len(comparison["regressions"]),
            "has_regressions": len(comparison["regressions"]) > 0,
        }

        return comparison
