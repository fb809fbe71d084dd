"""
Puzzle definitions: template, difficulty and precomputed sample games.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from .diamond_and_map import DiamondAndMap
from .edges import Edges
from .path import Path
from .puzzle_parse import PuzzleParse, PuzzleDefinitionError


class Difficulty(Enum):
    """Puzzle difficulty levels"""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass
class PuzzleSampleGame:
    """Precomputed solution and hints, used when generation fails"""
    path: List[int]
    diamonds: List[Tuple[int, int]] = field(default_factory=list)
    maps: List[int] = field(default_factory=list)

    def to_path(self) -> Path:
        return Path.from_list(self.path)

    def to_diamond_and_map(self) -> DiamondAndMap:
        return DiamondAndMap.from_lists(
            self.diamonds, self.maps, len(self.path), self.path[0], self.path[-1]
        )


@dataclass
class Puzzle:
    """A playable puzzle definition"""
    name: str
    difficulty: Difficulty
    template: str
    samples: List[PuzzleSampleGame] = field(default_factory=list)
    matrix: PuzzleParse = field(init=False, repr=False)

    def __post_init__(self):
        self.matrix = PuzzleParse(self.template)

    @property
    def key(self) -> Tuple[str, Difficulty]:
        return self.name, self.difficulty

    @property
    def num_vertexes(self) -> int:
        self.build()
        return self.matrix.num_vertexes

    def build(self) -> Edges:
        """Build the cell graph once; raises PuzzleDefinitionError on a bad template"""
        return self.matrix.build_edges()

    def get_sample_game(self, rng: Optional[np.random.Generator] = None) -> PuzzleSampleGame:
        """
        Pick one of the precomputed sample games.

        Args:
            rng: Random generator, a fresh unseeded one if omitted

        Returns:
            A sample game of this puzzle
        """
        if not self.samples:
            raise PuzzleDefinitionError(f"Puzzle {self.name} ({self.difficulty.value}) has no sample games")
        rng = rng if rng is not None else np.random.default_rng()
        return self.samples[int(rng.integers(len(self.samples)))]

    def __repr__(self):
        return f"Puzzle({self.name}, {self.difficulty.value}, {len(self.samples)} samples)"
