"""
Builds the cell graph and the edge store of a puzzle template.
"""

import logging
from typing import Iterable, Optional

from .edges import Edges
from .vertexes import Direction, Vertexes

logger = logging.getLogger(__name__)

# Neighbour scan order used when registering the edges of a cell
EDGE_SCAN_ORDER = (Direction.NW, Direction.NE, Direction.W, Direction.E, Direction.SW, Direction.SE)


class PuzzleDefinitionError(ValueError):
    """Raised when a puzzle template cannot be turned into a playable graph"""

    def __init__(self, message: str, vertexes: Iterable[int] = ()):
        super().__init__(message)
        self.vertexes = tuple(vertexes)


class PuzzleParse:
    """Cell graph plus edge store of one puzzle template"""

    def __init__(self, template: str):
        self.vertexes = Vertexes(template)
        self.edges = Edges()
        self._built = False

    @property
    def is_built(self) -> bool:
        return self._built

    @property
    def num_vertexes(self) -> int:
        return self.vertexes.num_vertexes

    @property
    def required_starting_vertex(self) -> Optional[int]:
        return self.vertexes.required_starting_vertex

    def build_edges(self) -> Edges:
        """
        Register every pair of adjacent playable cells as an UNDECIDED edge.

        The build happens once; later calls return the same store. A cell with
        exactly one neighbour becomes the required starting vertex.

        Returns:
            The edge store of the puzzle

        Raises:
            PuzzleDefinitionError: If the template has no playable cell, a cell
                has no neighbour, or more than one cell has a single neighbour
        """
        if self._built:
            return self.edges

        if not self.vertexes.is_built:
            self.vertexes.build()
        if self.vertexes.num_vertexes == 0:
            raise PuzzleDefinitionError("Puzzle template does not contain any playable cell")

        edges = Edges()
        single_edge_vertex: Optional[int] = None

        for vertex in range(self.vertexes.num_vertexes):
            adjacent = self.vertexes.get_adjacent(vertex)
            neighbours = [adjacent.get(d) for d in EDGE_SCAN_ORDER if adjacent.get(d) is not None]

            if not neighbours:
                raise PuzzleDefinitionError(f"Vertex {vertex} does not have any edges", [vertex])
            if len(neighbours) == 1:
                if single_edge_vertex is not None:
                    raise PuzzleDefinitionError(
                        f"Vertexes {single_edge_vertex} and {vertex} have only one edge "
                        f"(only one such vertex is allowed)",
                        [single_edge_vertex, vertex]
                    )
                single_edge_vertex = vertex

            edges.push_from_array(vertex, neighbours)

        self.edges = edges
        self.vertexes.required_starting_vertex = single_edge_vertex
        self._built = True

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Built edges of {self.vertexes}, required start: {single_edge_vertex}")
            for line in edges.debug_lines():
                logger.debug(line)

        return self.edges

    def __repr__(self):
        state = "built" if self._built else "not built"
        return f"PuzzleParse({self.vertexes}, {state})"
