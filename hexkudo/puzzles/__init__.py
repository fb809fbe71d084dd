"""
Puzzle definitions shipped with the engine.
"""

from typing import Dict, Tuple, Union

from ..core.puzzle import Difficulty, Puzzle
from . import easy_classic_22, easy_square_20

PUZZLE_MODULES = [
    easy_classic_22,
    easy_square_20,
]


def puzzle_map() -> Dict[Tuple[str, Difficulty], Puzzle]:
    """Fresh puzzle definitions keyed by (name, difficulty)"""
    puzzles = (module.get() for module in PUZZLE_MODULES)
    return {puzzle.key: puzzle for puzzle in puzzles}


def get_puzzle(name: str, difficulty: Union[Difficulty, str] = Difficulty.EASY) -> Puzzle:
    """
    Get a puzzle definition by name and difficulty.

    Args:
        name: Puzzle name, case insensitive
        difficulty: Difficulty or its value ('easy', 'medium', 'hard')

    Returns:
        Puzzle definition

    Raises:
        ValueError: If the difficulty or the puzzle is not known
    """
    if not isinstance(difficulty, Difficulty):
        try:
            difficulty = Difficulty(str(difficulty).lower())
        except ValueError:
            raise ValueError(f"Unknown difficulty: {difficulty}. "
                             f"Available: {[d.value for d in Difficulty]}") from None

    for (puzzle_name, puzzle_difficulty), puzzle in puzzle_map().items():
        if puzzle_name.lower() == name.lower() and puzzle_difficulty == difficulty:
            return puzzle

    available = [f"{n} ({d.value})" for n, d in puzzle_map()]
    raise ValueError(f"Unknown puzzle: {name} ({difficulty.value}). Available: {available}")


__all__ = ['PUZZLE_MODULES', 'puzzle_map', 'get_puzzle']
