"""
Benchmarking tools for the Hexkudo generation pipeline.
"""

from .benchmark import GenerationBenchmark, BenchmarkConfig, BenchmarkResult

__all__ = ['GenerationBenchmark', 'BenchmarkConfig', 'BenchmarkResult']
