"""
Path and hint generators for Hexkudo puzzles.
"""

from .base_generator import BaseGenerator, GeneratorConfig, GeneratorResult, GeneratorError
from .random_path import RandomPath
from .diamonds import DiamondGenerator
from .puzzle_generator import PuzzleGenerator, PuzzleGeneratorConfig, PuzzleGame

__all__ = [
    # Base classes
    'BaseGenerator', 'GeneratorConfig', 'GeneratorResult', 'GeneratorError',

    # Searches
    'RandomPath', 'DiamondGenerator',

    # Main generator
    'PuzzleGenerator', 'PuzzleGeneratorConfig', 'PuzzleGame'
]
