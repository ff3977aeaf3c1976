"""
Benchmarking tools for Nurikabe solvers.
"""

from .benchmark import Benchmark, BenchmarkConfig, BenchmarkResult, BenchmarkAnalyzer

__all__ = [
    'Benchmark',
    'BenchmarkConfig',
    'BenchmarkResult',
    'BenchmarkAnalyzer',
]
