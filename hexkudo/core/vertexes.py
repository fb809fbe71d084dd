"""
Cell graph of a Hexkudo puzzle, parsed from an ASCII template.

Playable cells sit on a staggered character grid: horizontal neighbours are
two columns apart, diagonal neighbours one column and one row apart.

    O O
   O O O
    O O
"""

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from ..config import VERTEX_MARKER, LOGO_MARKER

logger = logging.getLogger(__name__)


class CellType(IntEnum):
    """Non playable cell markers stored in the cell matrix"""
    BACKGROUND = -1
    LOGO = -2


class Direction(Enum):
    """Neighbour directions with their (dx, dy) offset on the character grid"""
    W = (-2, 0)
    NW = (-1, -1)
    NE = (1, -1)
    E = (2, 0)
    SE = (1, 1)
    SW = (-1, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))


@dataclass
class Adjacent:
    """Neighbour vertex ids of one cell, None where there is no playable cell"""
    w: Optional[int] = None
    nw: Optional[int] = None
    ne: Optional[int] = None
    e: Optional[int] = None
    se: Optional[int] = None
    sw: Optional[int] = None

    def get(self, direction: Direction) -> Optional[int]:
        return getattr(self, direction.name.lower())

    def direction_of(self, vertex: int) -> Optional[Direction]:
        """Direction in which the given neighbour lies, None if it is not a neighbour"""
        for direction in Direction:
            if self.get(direction) == vertex:
                return direction
        return None

    def opposite(self, vertex1: int, vertex2: int) -> bool:
        """
        Check whether two neighbours sit on opposite sides of the cell
        (W/E, NW/SE or NE/SW).
        """
        direction = self.direction_of(vertex1)
        if direction is None:
            return False
        return self.get(direction.opposite) == vertex2

    def vertexes(self) -> List[int]:
        """Neighbour ids in W, NW, NE, E, SE, SW order"""
        return [v for v in (self.get(d) for d in Direction) if v is not None]

    def __contains__(self, vertex: int) -> bool:
        return self.direction_of(vertex) is not None

    def __len__(self) -> int:
        return len(self.vertexes())


class Vertexes:
    """Playable cells of a puzzle template and their positions"""

    def __init__(self, source: str):
        """
        Initialize the cell graph from an ASCII template.

        Args:
            source: Template text, 'o' marks a playable cell, 'x' a logo cell
                and any other character background. Case is ignored.
        """
        self.source = source.lower()
        self.num_vertexes = 0
        self.width = 0
        self.height = 0
        self.required_starting_vertex: Optional[int] = None
        self.vertex_array = np.full((0, 0), int(CellType.BACKGROUND), dtype=int)
        self._coordinates: List[Tuple[int, int]] = []
        self._logos: List[Tuple[int, int]] = []
        self._built = False

    @property
    def is_built(self) -> bool:
        return self._built

    def build(self):
        """Scan the template and assign sequential ids to the playable cells in row-major order"""
        lines = [line.rstrip() for line in self.source.splitlines()]
        lines = [line for line in lines if line]

        self.height = len(lines)
        self.width = max((len(line) for line in lines), default=0)
        self.vertex_array = np.full((self.height, self.width), int(CellType.BACKGROUND), dtype=int)
        self._coordinates = []
        self._logos = []
        self.required_starting_vertex = None

        for y, line in enumerate(lines):
            for x, char in enumerate(line):
                if char == VERTEX_MARKER:
                    self.vertex_array[y, x] = len(self._coordinates)
                    self._coordinates.append((x, y))
                elif char == LOGO_MARKER:
                    self.vertex_array[y, x] = int(CellType.LOGO)
                    self._logos.append((x, y))

        self.num_vertexes = len(self._coordinates)
        self._built = True
        logger.debug(f"Built {self.num_vertexes} vertexes on a {self.width}x{self.height} grid")

    def get_cell(self, x: int, y: int) -> int:
        """Cell content at (x, y): a vertex id or a CellType, background outside the grid"""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return CellType.BACKGROUND
        cell = int(self.vertex_array[y, x])
        if cell < 0:
            return CellType(cell)
        return cell

    def get_vertex(self, x: int, y: int) -> Optional[int]:
        cell = self.get_cell(x, y)
        return cell if cell >= 0 else None

    def get_coordinates(self, vertex: int) -> Tuple[int, int]:
        if not (0 <= vertex < self.num_vertexes):
            raise ValueError(f"Vertex {vertex} out of range (puzzle has {self.num_vertexes} vertexes)")
        return self._coordinates[vertex]

    def get_logo_coordinates(self) -> List[Tuple[int, int]]:
        return list(self._logos)

    def get_adjacent(self, vertex: int) -> Adjacent:
        x, y = self.get_coordinates(vertex)
        return Adjacent(**{
            direction.name.lower(): self.get_vertex(x + direction.dx, y + direction.dy)
            for direction in Direction
        })

    def is_adjacent(self, vertex1: int, vertex2: int) -> bool:
        return vertex2 in self.get_adjacent(vertex1)

    def positions(self) -> Dict[int, Tuple[int, int]]:
        """Mapping of every vertex id to its (x, y) coordinates"""
        return dict(enumerate(self._coordinates))

    def __iter__(self) -> Iterator[Tuple[int, int, int]]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.get_cell(x, y)

    def __len__(self) -> int:
        return self.num_vertexes

    def __repr__(self):
        return f"Vertexes({self.num_vertexes} vertexes, {self.width}x{self.height})"
