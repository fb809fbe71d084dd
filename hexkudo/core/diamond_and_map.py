"""
Hints of a generated puzzle: diamonds between consecutive cells and map cells
whose values are revealed.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Tuple

from .vertexes import Vertexes

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Diamond:
    """Unordered pair of adjacent cells whose values are consecutive"""
    vertex1: int
    vertex2: int

    def is_in(self, vertex: int) -> bool:
        return vertex == self.vertex1 or vertex == self.vertex2

    def other(self, vertex: int) -> Optional[int]:
        """The end of the diamond that is not the given vertex"""
        if vertex == self.vertex1:
            return self.vertex2
        if vertex == self.vertex2:
            return self.vertex1
        return None

    def as_tuple(self) -> Tuple[int, int]:
        return self.vertex1, self.vertex2

    def __hash__(self):
        return hash(frozenset((self.vertex1, self.vertex2)))

    def __eq__(self, other):
        if isinstance(other, Diamond):
            return {self.vertex1, self.vertex2} == {other.vertex1, other.vertex2}
        return False

    def __repr__(self):
        return f"Diamond({self.vertex1}<->{self.vertex2})"


class DiamondAndMap:
    """Diamond set and map cell set of one puzzle"""

    def __init__(self, num_vertexes: int, starting_vertex: int, ending_vertex: int):
        self.num_vertexes = num_vertexes
        self.starting_vertex = starting_vertex
        self.ending_vertex = ending_vertex
        self._diamonds: Set[Diamond] = set()
        self._maps: Set[int] = set()

    @classmethod
    def from_lists(cls, diamonds: Iterable[Tuple[int, int]], maps: Iterable[int],
                   num_vertexes: int, starting_vertex: int, ending_vertex: int) -> "DiamondAndMap":
        """Load precomputed hints as they are, without running compute()"""
        diamond_and_map = cls(num_vertexes, starting_vertex, ending_vertex)
        for vertex1, vertex2 in diamonds:
            diamond_and_map.insert(vertex1, vertex2)
        for vertex in maps:
            diamond_and_map.add_map(vertex)
        return diamond_and_map

    def insert(self, vertex1: int, vertex2: int):
        self._diamonds.add(Diamond(vertex1, vertex2))

    def remove(self, vertex1: int, vertex2: int):
        self._diamonds.discard(Diamond(vertex1, vertex2))

    def add_map(self, vertex: int):
        self._maps.add(vertex)

    def clear(self):
        self._diamonds.clear()
        self._maps.clear()

    def is_diamond(self, vertex1: int, vertex2: int) -> bool:
        return Diamond(vertex1, vertex2) in self._diamonds

    def is_map(self, vertex: int) -> bool:
        return vertex in self._maps

    @property
    def num_diamonds(self) -> int:
        return len(self._diamonds)

    @property
    def num_maps(self) -> int:
        return len(self._maps)

    def get_map(self) -> List[int]:
        return sorted(self._maps)

    def get_diamonds(self) -> List[Tuple[int, int]]:
        return sorted(tuple(sorted(d.as_tuple())) for d in self._diamonds)

    def get_diamond_and_map(self) -> Tuple[List[Tuple[int, int]], List[int]]:
        return self.get_diamonds(), self.get_map()

    def compute(self, vertexes: Vertexes):
        """
        Reduce the diamond set into map cells.

        The start and end cells are always mapped. Then, until nothing changes:
        a cell with exactly two diamonds towards opposite neighbours gets both
        neighbours mapped and loses both diamonds, and a diamond touching a
        mapped cell is replaced by mapping its other end.

        Args:
            vertexes: Cell graph used for the opposite-neighbour test
        """
        self._maps.add(self.starting_vertex)
        self._maps.add(self.ending_vertex)

        changed = True
        while changed:
            changed = self._fold_opposite_diamonds(vertexes)
            changed = self._propagate_maps() or changed

        logger.debug(f"Computed {len(self._diamonds)} diamonds and {len(self._maps)} maps")

    def _fold_opposite_diamonds(self, vertexes: Vertexes) -> bool:
        folded = False
        for vertex in range(self.num_vertexes):
            touching = [d for d in self._diamonds if d.is_in(vertex)]
            if len(touching) != 2:
                continue
            neighbour1 = touching[0].other(vertex)
            neighbour2 = touching[1].other(vertex)
            if vertexes.get_adjacent(vertex).opposite(neighbour1, neighbour2):
                self._maps.update((neighbour1, neighbour2))
                self._diamonds.difference_update(touching)
                folded = True
        return folded

    def _propagate_maps(self) -> bool:
        propagated = False
        while True:
            touching = [d for d in self._diamonds if d.vertex1 in self._maps or d.vertex2 in self._maps]
            if not touching:
                return propagated
            for diamond in touching:
                self._maps.update(diamond.as_tuple())
                self._diamonds.discard(diamond)
            propagated = True

    def __eq__(self, other):
        if isinstance(other, DiamondAndMap):
            return (self._diamonds == other._diamonds and self._maps == other._maps
                    and self.starting_vertex == other.starting_vertex
                    and self.ending_vertex == other.ending_vertex)
        return False

    def __repr__(self):
        return (f"DiamondAndMap({len(self._diamonds)} diamonds, {len(self._maps)} maps, "
                f"start={self.starting_vertex}, end={self.ending_vertex})")
