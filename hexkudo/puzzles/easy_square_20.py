"""
Square easy puzzle: four staggered rows of five cells.
"""

from ..core.puzzle import Difficulty, Puzzle, PuzzleSampleGame

NAME = "Square"
DIFFICULTY = Difficulty.EASY

TEMPLATE = """
O O O O O
 O O O O O
O O O O O
 O O O O O
"""

SAMPLE_GAMES = [
    PuzzleSampleGame(
        path=[0, 1, 2, 3, 4, 9, 8, 7, 6, 5, 10, 11, 12, 13, 14, 19, 18, 17, 16, 15],
        diamonds=[],
        maps=[0, 4, 5, 14, 15],
    ),
    PuzzleSampleGame(
        path=[0, 5, 10, 15, 16, 11, 6, 1, 2, 7, 12, 17, 18, 13, 8, 3, 4, 9, 14, 19],
        diamonds=[(8, 13)],
        maps=[0, 9, 11, 12, 15, 19],
    ),
    PuzzleSampleGame(
        path=[19, 18, 17, 16, 15, 10, 11, 12, 13, 14, 9, 4, 8, 3, 7, 2, 6, 1, 5, 0],
        diamonds=[(1, 5), (1, 6), (2, 6), (4, 8), (4, 9)],
        maps=[0, 3, 14, 15, 19],
    ),
]


def get() -> Puzzle:
    return Puzzle(NAME, DIFFICULTY, TEMPLATE, list(SAMPLE_GAMES))
