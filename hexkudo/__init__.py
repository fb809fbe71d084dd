"""
Hexkudo puzzle generation engine.

Random Hamiltonian paths over hexagonal cell graphs, with the diamond and map
hints that make each path the unique solution of its puzzle.
"""

from .core import (
    Vertexes, Edges, EdgeStatus, Path, DiamondAndMap,
    PuzzleParse, PuzzleDefinitionError,
    Puzzle, PuzzleSampleGame, Difficulty
)
from .generators import (
    GeneratorConfig, GeneratorResult, GeneratorError,
    RandomPath, DiamondGenerator,
    PuzzleGenerator, PuzzleGeneratorConfig, PuzzleGame
)
from .puzzles import puzzle_map, get_puzzle

__version__ = "0.1.0"

__all__ = [
    'Vertexes', 'Edges', 'EdgeStatus', 'Path', 'DiamondAndMap',
    'PuzzleParse', 'PuzzleDefinitionError',
    'Puzzle', 'PuzzleSampleGame', 'Difficulty',
    'GeneratorConfig', 'GeneratorResult', 'GeneratorError',
    'RandomPath', 'DiamondGenerator',
    'PuzzleGenerator', 'PuzzleGeneratorConfig', 'PuzzleGame',
    'puzzle_map', 'get_puzzle',
]
