"""
Core data structures and utilities for the Hexkudo generation engine.
"""

from .vertexes import Vertexes, Adjacent, Direction, CellType
from .edges import Edges, EdgeStatus
from .path import Path
from .diamond_and_map import Diamond, DiamondAndMap
from .puzzle_parse import PuzzleParse, PuzzleDefinitionError
from .puzzle import Puzzle, PuzzleSampleGame, Difficulty
from .validator import PathValidator, ValidationResult
from .utils import (
    setup_logger, timer, memory_usage,
    PathConverter, format_sample_games, calculate_game_stats
)

__all__ = [
    # Cell graph
    'Vertexes', 'Adjacent', 'Direction', 'CellType',
    'Edges', 'EdgeStatus',
    'PuzzleParse', 'PuzzleDefinitionError',

    # Games
    'Path', 'Diamond', 'DiamondAndMap',
    'Puzzle', 'PuzzleSampleGame', 'Difficulty',

    # Validation
    'PathValidator', 'ValidationResult',

    # Utilities
    'setup_logger', 'timer', 'memory_usage',
    'PathConverter', 'format_sample_games', 'calculate_game_stats'
]
