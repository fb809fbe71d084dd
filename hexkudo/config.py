"""
Configuration file for the Hexkudo puzzle generation engine.
"""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
RESULTS_DIR = PROJECT_ROOT / "results"
BENCHMARK_DIR = RESULTS_DIR / "benchmarks"

# Template markers (templates are lower-cased before parsing)
VERTEX_MARKER = "o"
LOGO_MARKER = "x"

# Generation parameters
MAX_TIME_SEC = 6.0  # wall-clock budget of one search (random path or diamonds)
MAX_ATTEMPTS = 3  # attempts before falling back to a sample game
DEFAULT_DIFFICULTY = "easy"

# Benchmark parameters
BENCHMARK_RUNS = 10

# Logging configuration
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
