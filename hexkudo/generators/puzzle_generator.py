"""
Puzzle generator: random path, diamonds and maps, with a sample game fallback.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np

from ..config import MAX_TIME_SEC, MAX_ATTEMPTS
from ..core.diamond_and_map import DiamondAndMap
from ..core.path import Path
from ..core.puzzle import Difficulty, Puzzle
from ..core.puzzle_parse import PuzzleDefinitionError
from ..core.utils import setup_logger, timer, calculate_game_stats, PathConverter
from ..core.validator import PathValidator
from .base_generator import GeneratorConfig, GeneratorError, GeneratorResult
from .diamonds import DiamondGenerator
from .random_path import RandomPath


class PuzzleGeneratorConfig:
    """Configuration for puzzle generator"""

    def __init__(self, **kwargs):
        self.time_limit: float = kwargs.get('time_limit', MAX_TIME_SEC)
        self.max_attempts: int = kwargs.get('max_attempts', MAX_ATTEMPTS)
        self.random_seed: Optional[int] = kwargs.get('random_seed', None)
        self.verbose: bool = kwargs.get('verbose', False)
        self.log_file = kwargs.get('log_file', None)
        self.validate: bool = kwargs.get('validate', True)

    def generator_config(self) -> GeneratorConfig:
        """Configuration handed to each search"""
        return GeneratorConfig(
            time_limit=self.time_limit,
            random_seed=self.random_seed,
            verbose=self.verbose,
            log_file=self.log_file
        )


@dataclass
class PuzzleGame:
    """A game ready to be played"""
    puzzle_name: str
    difficulty: Difficulty
    path: Path
    diamond_and_map: DiamondAndMap
    from_sample: bool = False
    attempts: int = 0
    message: str = ""
    stats: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self):
        source = "sample" if self.from_sample else "generated"
        return (f"PuzzleGame({self.puzzle_name}, {self.difficulty.value}, {source}, "
                f"{self.diamond_and_map.num_diamonds} diamonds, {self.diamond_and_map.num_maps} maps)")


class PuzzleGenerator:
    """Generate Hexkudo games for the puzzle definitions"""

    def __init__(self, config: Optional[PuzzleGeneratorConfig] = None):
        self.config = config or PuzzleGeneratorConfig()
        self.logger = setup_logger(
            self.__class__.__name__,
            self.config.log_file,
            "DEBUG" if self.config.verbose else "INFO"
        )
        self.rng = np.random.default_rng(self.config.random_seed)

    @timer
    def generate(self, puzzle: Puzzle) -> PuzzleGame:
        """
        Generate a game for a puzzle.

        Generation is attempted up to max_attempts times; when every attempt
        fails a precomputed sample game of the puzzle is returned instead.

        Args:
            puzzle: The puzzle definition

        Returns:
            The generated (or sample) game

        Raises:
            PuzzleDefinitionError: If the template is malformed, or generation
                failed and the puzzle has no sample game
        """
        puzzle.build()
        self.logger.info(f"Generating game for {puzzle.name} ({puzzle.difficulty.value}), "
                         f"{puzzle.num_vertexes} vertexes")

        last_message = ""
        for attempt in range(self.config.max_attempts):
            try:
                result = self.generate_once(puzzle)
            except RecursionError as e:
                self.logger.error(f"Attempt {attempt + 1} exhausted the stack: {e}", exc_info=True)
                last_message = "Recursion limit reached"
                continue

            if result.success:
                self.logger.info(f"Generated game on attempt {attempt + 1} in {result.duration:.3f}s")
                self.logger.debug("\n" + PathConverter.to_string(puzzle.matrix.vertexes, result.path,
                                                                 result.diamond_and_map))
                result.stats.update(calculate_game_stats(puzzle.matrix.vertexes, result.diamond_and_map))
                return PuzzleGame(
                    puzzle_name=puzzle.name,
                    difficulty=puzzle.difficulty,
                    path=result.path,
                    diamond_and_map=result.diamond_and_map,
                    attempts=attempt + 1,
                    message=result.message,
                    stats=result.stats
                )

            last_message = result.message
            self.logger.warning(f"Attempt {attempt + 1}/{self.config.max_attempts} failed: {result.message}")

        sample = puzzle.get_sample_game(self.rng)
        self.logger.info(f"Falling back to a sample game after {self.config.max_attempts} attempts")
        return PuzzleGame(
            puzzle_name=puzzle.name,
            difficulty=puzzle.difficulty,
            path=sample.to_path(),
            diamond_and_map=sample.to_diamond_and_map(),
            from_sample=True,
            attempts=self.config.max_attempts,
            message=f"Sample game used: {last_message}"
        )

    def generate_once(self, puzzle: Puzzle) -> GeneratorResult:
        """
        Run one random path search followed by one diamond search.

        Returns:
            GeneratorResult with the path and the hints on success; iterations
            and duration add up both searches
        """
        edges = puzzle.build()
        vertexes = puzzle.matrix.vertexes
        config = self.config.generator_config()

        path_search = RandomPath(edges, vertexes, config, self.rng)
        path_result = path_search.generate()
        if not path_result.success:
            if path_result.error == GeneratorError.NO_PATH:
                self.logger.warning(f"No path from vertex {path_search.starting_vertex} "
                                    f"of {puzzle.name} ({puzzle.difficulty.value})")
            path_result.stats['stage'] = 'path'
            return path_result

        if self.config.validate:
            validation = PathValidator.validate_path(path_result.path, puzzle.matrix)
            if not validation:
                self.logger.error(f"Generated invalid path: {validation.errors}")
                return GeneratorResult(success=False, path=path_result.path, error=GeneratorError.NO_PATH,
                                       iterations=path_result.iterations, duration=path_result.duration,
                                       message=f"Invalid path: {'; '.join(validation.errors)}",
                                       stats={'stage': 'validation'})

        diamond_search = DiamondGenerator(edges, path_result.path, config, self.rng)
        diamond_result = diamond_search.generate_diamonds(vertexes)

        if diamond_result.success and self.config.validate:
            validation = PathValidator.validate_game(path_result.path, diamond_result.diamond_and_map,
                                                     puzzle.matrix)
            if not validation:
                self.logger.error(f"Generated invalid hints: {validation.errors}")
                return GeneratorResult(success=False, path=path_result.path, error=GeneratorError.NO_PATH,
                                       iterations=path_result.iterations + diamond_result.iterations,
                                       duration=path_result.duration + diamond_result.duration,
                                       message=f"Invalid game: {'; '.join(validation.errors)}",
                                       stats={'stage': 'validation'})

        stats = {
            'stage': 'done' if diamond_result.success else 'diamonds',
            'starting_vertex': path_result.stats.get('starting_vertex'),
            'path_iterations': path_result.iterations,
            'path_duration': path_result.duration,
            'diamond_iterations': diamond_result.iterations,
            'diamond_duration': diamond_result.duration,
        }
        stats.update(diamond_result.stats)

        return GeneratorResult(
            success=diamond_result.success,
            path=path_result.path,
            diamond_and_map=diamond_result.diamond_and_map,
            error=diamond_result.error,
            iterations=path_result.iterations + diamond_result.iterations,
            duration=path_result.duration + diamond_result.duration,
            message=diamond_result.message,
            stats=stats
        )

    def generate_batch(self, puzzle: Puzzle, count: int) -> List[GeneratorResult]:
        """Run count independent generation attempts, failures included"""
        puzzle.build()
        return [self.generate_once(puzzle) for _ in range(count)]

    def check_template(self, puzzle: Puzzle) -> Dict[int, GeneratorError]:
        """
        Try a path search from every possible starting vertex.

        Returns:
            Failure reason per starting vertex that did not yield a path

        Raises:
            PuzzleDefinitionError: If no starting vertex yields a path
        """
        edges = puzzle.build()
        vertexes = puzzle.matrix.vertexes
        config = self.config.generator_config()

        if vertexes.required_starting_vertex is not None:
            starts = [vertexes.required_starting_vertex]
        else:
            starts = list(range(vertexes.num_vertexes))

        failures: Dict[int, GeneratorError] = {}
        for start in starts:
            result = RandomPath(edges, vertexes, config, self.rng).generate(start)
            if not result.success:
                failures[start] = result.error

        no_path = [v for v, error in failures.items() if error == GeneratorError.NO_PATH]
        if len(no_path) == len(starts):
            raise PuzzleDefinitionError(
                f"Puzzle {puzzle.name} ({puzzle.difficulty.value}) has no path from any starting vertex",
                no_path
            )
        if failures:
            reasons = {vertex: error.value for vertex, error in failures.items()}
            self.logger.warning(f"{len(failures)}/{len(starts)} starting vertexes failed: {reasons}")
        return failures
