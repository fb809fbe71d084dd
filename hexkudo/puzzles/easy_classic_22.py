"""
Classic easy puzzle: 22 cells around the logo.
"""

from ..core.puzzle import Difficulty, Puzzle, PuzzleSampleGame

NAME = "Classic"
DIFFICULTY = Difficulty.EASY

TEMPLATE = """
   O O
  O O O
 O O O O
O O X O O
 O O O O
  O O O
   O O
"""

SAMPLE_GAMES = [
    PuzzleSampleGame(
        path=[3, 6, 7, 8, 4, 1, 0, 2, 5, 9, 13, 10, 14, 17, 18, 20, 21, 19, 15, 11, 12, 16],
        diamonds=[(18, 20), (9, 13), (17, 18), (13, 10)],
        maps=[3, 6, 8, 16],
    ),
    PuzzleSampleGame(
        path=[8, 7, 4, 1, 3, 0, 2, 6, 10, 5, 9, 13, 17, 20, 21, 19, 18, 14, 15, 11, 12, 16],
        diamonds=[(18, 14), (19, 18), (6, 10), (0, 2), (3, 0), (5, 9)],
        maps=[8, 16, 7],
    ),
    PuzzleSampleGame(
        path=[13, 17, 18, 20, 21, 19, 15, 14, 10, 9, 5, 2, 6, 3, 0, 1, 4, 7, 8, 11, 16, 12],
        diamonds=[(5, 2), (20, 21), (4, 7), (7, 8), (18, 20)],
        maps=[13, 16, 11, 12],
    ),
]


def get() -> Puzzle:
    return Puzzle(NAME, DIFFICULTY, TEMPLATE, list(SAMPLE_GAMES))
