"""
Benchmark of the generation pipeline: timings, iterations and failures.
"""

import json
from dataclasses import dataclass, asdict, field
from datetime import datetime
from pathlib import Path as FilePath
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
from tqdm import tqdm

from ..config import BENCHMARK_DIR, BENCHMARK_RUNS, MAX_TIME_SEC
from ..core.puzzle import Puzzle, PuzzleSampleGame
from ..core.utils import setup_logger, memory_usage
from ..generators.base_generator import GeneratorResult
from ..generators.puzzle_generator import PuzzleGenerator, PuzzleGeneratorConfig


@dataclass
class BenchmarkResult:
    """Result of a single generation attempt"""
    run_id: int
    puzzle_name: str
    difficulty: str
    num_vertexes: int
    success: bool

    # Where the attempt stopped: path, validation, diamonds or done
    stage: str = ""
    error: str = ""
    starting_vertex: Optional[int] = None

    # Timings and search effort
    duration: float = 0.0
    iterations: int = 0
    path_duration: float = 0.0
    path_iterations: int = 0
    diamond_duration: float = 0.0
    diamond_iterations: int = 0

    # Hints
    num_diamonds: int = 0
    num_maps: int = 0

    memory_mb: float = 0.0
    timestamp: str = ""
    extra_stats: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return asdict(self)

    @classmethod
    def from_generator_result(cls, run_id: int, puzzle: Puzzle, result: GeneratorResult,
                              memory_mb: float = 0.0) -> "BenchmarkResult":
        stats = result.stats
        diamond_and_map = result.diamond_and_map
        return cls(
            run_id=run_id,
            puzzle_name=puzzle.name,
            difficulty=puzzle.difficulty.value,
            num_vertexes=puzzle.num_vertexes,
            success=result.success,
            stage=stats.get('stage', ''),
            error=result.error.value if result.error else "",
            starting_vertex=stats.get('starting_vertex'),
            duration=result.duration,
            iterations=result.iterations,
            path_duration=stats.get('path_duration', result.duration if stats.get('stage') == 'path' else 0.0),
            path_iterations=stats.get('path_iterations',
                                      result.iterations if stats.get('stage') == 'path' else 0),
            diamond_duration=stats.get('diamond_duration', 0.0),
            diamond_iterations=stats.get('diamond_iterations', 0),
            num_diamonds=diamond_and_map.num_diamonds if diamond_and_map else 0,
            num_maps=diamond_and_map.num_maps if diamond_and_map else 0,
            memory_mb=memory_mb,
            timestamp=datetime.now().isoformat()
        )


class BenchmarkConfig:
    """Configuration for generation benchmarks"""

    def __init__(self, **kwargs):
        self.runs: int = kwargs.get('runs', BENCHMARK_RUNS)
        self.time_limit: float = kwargs.get('time_limit', MAX_TIME_SEC)
        self.random_seed: Optional[int] = kwargs.get('random_seed', None)
        self.verbose: bool = kwargs.get('verbose', False)

        # Give up collecting games after this many failed attempts
        self.max_failures: int = kwargs.get('max_failures', 1000)

        # Output parameters
        self.output_dir: FilePath = FilePath(kwargs.get('output_dir', BENCHMARK_DIR))
        self.show_progress: bool = kwargs.get('show_progress', True)


class GenerationBenchmark:
    """Run repeated generations of a puzzle and collect statistics"""

    def __init__(self, config: Optional[BenchmarkConfig] = None):
        self.config = config or BenchmarkConfig()
        self.logger = setup_logger(self.__class__.__name__)
        self.generator = PuzzleGenerator(PuzzleGeneratorConfig(
            time_limit=self.config.time_limit,
            random_seed=self.config.random_seed,
            verbose=self.config.verbose
        ))
        self.results: List[BenchmarkResult] = []

    def run(self, puzzle: Puzzle, runs: Optional[int] = None) -> pd.DataFrame:
        """
        Run a fixed number of generation attempts, failures included.

        Args:
            puzzle: Puzzle to generate
            runs: Number of attempts, config.runs if omitted

        Returns:
            DataFrame with one row per attempt
        """
        runs = runs if runs is not None else self.config.runs
        puzzle.build()
        self.results = []

        for run_id in tqdm(range(runs), desc=f"{puzzle.name} {puzzle.difficulty.value}",
                           disable=not self.config.show_progress):
            self._run_once(run_id, puzzle)

        return self.to_dataframe()

    def generate_games(self, puzzle: Puzzle, count: int) -> Tuple[List[PuzzleSampleGame], pd.DataFrame]:
        """
        Generate count successful games, retrying failed attempts.

        Returns:
            The games and a DataFrame of every attempt
        """
        puzzle.build()
        self.results = []
        games: List[PuzzleSampleGame] = []
        failures = 0

        with tqdm(total=count, desc=f"{puzzle.name} {puzzle.difficulty.value}",
                  disable=not self.config.show_progress) as progress:
            while len(games) < count:
                result = self._run_once(len(self.results), puzzle)
                if not result.success:
                    failures += 1
                    if failures >= self.config.max_failures:
                        self.logger.error(f"Giving up after {failures} failed attempts "
                                          f"({len(games)}/{count} games generated)")
                        break
                    continue

                diamonds, maps = result.diamond_and_map.get_diamond_and_map()
                games.append(PuzzleSampleGame(path=result.path.get(), diamonds=diamonds, maps=maps))
                progress.update(1)

        return games, self.to_dataframe()

    def _run_once(self, run_id: int, puzzle: Puzzle) -> GeneratorResult:
        result = self.generator.generate_once(puzzle)
        self.results.append(BenchmarkResult.from_generator_result(run_id, puzzle, result, memory_usage()))
        if not result.success:
            self.logger.debug(f"Run {run_id} failed at stage {result.stats.get('stage')}: {result.message}")
        return result

    def to_dataframe(self) -> pd.DataFrame:
        columns = list(BenchmarkResult.__dataclass_fields__)
        return pd.DataFrame([r.to_dict() for r in self.results], columns=columns)

    @staticmethod
    def summarize(df: pd.DataFrame) -> Dict[str, Any]:
        """
        Summary statistics of a benchmark.

        Path timings and iterations are taken over the attempts whose path
        search succeeded; errors count every failed attempt.
        """
        if df.empty:
            return {
                'runs': 0, 'successes': 0, 'errors': 0, 'success_rate': 0.0,
                'total_time': 0.0, 'average_time': 0.0, 'max_time': 0.0,
                'average_iterations': 0.0, 'average_diamond_time': 0.0,
                'average_diamonds': 0.0, 'average_maps': 0.0, 'errors_by_stage': {},
            }

        paths = df[df['stage'] != 'path']
        successes = df[df['success']]
        failures = df[~df['success']]

        return {
            'runs': len(df),
            'successes': len(successes),
            'errors': len(failures),
            'success_rate': len(successes) / len(df),
            'total_time': float(paths['path_duration'].sum()),
            'average_time': float(paths['path_duration'].mean()) if not paths.empty else 0.0,
            'max_time': float(paths['path_duration'].max()) if not paths.empty else 0.0,
            'average_iterations': float(paths['path_iterations'].mean()) if not paths.empty else 0.0,
            'average_diamond_time': float(successes['diamond_duration'].mean()) if not successes.empty else 0.0,
            'average_diamonds': float(successes['num_diamonds'].mean()) if not successes.empty else 0.0,
            'average_maps': float(successes['num_maps'].mean()) if not successes.empty else 0.0,
            'errors_by_stage': failures['stage'].value_counts().to_dict(),
        }

    def save_results(self, df: pd.DataFrame, prefix: str = "generation") -> FilePath:
        """
        Save benchmark rows as CSV plus a JSON summary.

        Returns:
            Path of the CSV file
        """
        self.config.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        csv_file = self.config.output_dir / f"{prefix}_results_{timestamp}.csv"
        df.to_csv(csv_file, index=False)

        json_file = self.config.output_dir / f"{prefix}_summary_{timestamp}.json"
        with open(json_file, 'w') as f:
            json.dump({
                'config': {
                    'runs': self.config.runs,
                    'time_limit': self.config.time_limit,
                    'random_seed': self.config.random_seed,
                },
                'summary': self.summarize(df),
            }, f, indent=2, default=str)

        self.logger.info(f"Results saved to {csv_file}")
        return csv_file
