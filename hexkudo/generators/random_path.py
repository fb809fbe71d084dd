"""
Random Hamiltonian path over the cell graph.

Depth-first search with randomised neighbour order. Every branch works on its
own copy of the edge store, so backtracking never has to undo propagation.
"""

from typing import Optional

import numpy as np

from ..core.edges import Edges, EdgeStatus
from ..core.path import Path
from ..core.vertexes import Vertexes
from .base_generator import BaseGenerator, GeneratorConfig, GeneratorError, GeneratorResult


class RandomPath(BaseGenerator):
    """Generate a random path visiting every vertex exactly once"""

    detect_loops = True

    def __init__(self, edges: Edges, vertexes: Vertexes,
                 config: Optional[GeneratorConfig] = None,
                 rng: Optional[np.random.Generator] = None):
        """
        Initialize the random path search.

        Args:
            edges: Edge store of the puzzle, left untouched by the search
            vertexes: Cell graph of the puzzle
            config: Search configuration
            rng: Random generator
        """
        super().__init__(config, rng)
        self.edges = edges
        self.vertexes = vertexes
        self.num_vertexes = vertexes.num_vertexes
        self.starting_vertex: Optional[int] = None
        self.path = Path()

    @property
    def endpoints(self):
        return () if self.starting_vertex is None else (self.starting_vertex,)

    def generate(self, starting_vertex: Optional[int] = None) -> GeneratorResult:
        """
        Search a random Hamiltonian path.

        Args:
            starting_vertex: Preferred first vertex, ignored when the puzzle
                has a required starting vertex; random when omitted

        Returns:
            GeneratorResult holding the path on success
        """
        self.path = Path()
        if self.num_vertexes == 0:
            return GeneratorResult(success=False, error=GeneratorError.NO_PATH,
                                   message="Puzzle has no vertexes")

        self.starting_vertex = self._select_starting_vertex(starting_vertex)
        self._start_clock()
        if self._trace:
            self.logger.debug(f"Searching random path from vertex {self.starting_vertex}")

        error = self.find_path(self.starting_vertex, self.edges.copy(), self.path)
        self._stop_clock()

        stats = {'starting_vertex': self.starting_vertex, 'num_vertexes': self.num_vertexes}
        if error is not None:
            message = (f"No path from vertex {self.starting_vertex}" if error == GeneratorError.NO_PATH
                       else f"Time limit of {self.config.time_limit}s exceeded")
            self.logger.debug(f"Random path failed after {self.iteration} iterations: {message}")
            return GeneratorResult(success=False, error=error, iterations=self.iteration,
                                   duration=self.duration, message=message, stats=stats)

        self.logger.debug(f"Random path found in {self.duration:.3f}s with {self.iteration} iterations")
        return GeneratorResult(success=True, path=self.path.copy(), iterations=self.iteration,
                               duration=self.duration, message="Path found", stats=stats)

    def _select_starting_vertex(self, starting_vertex: Optional[int]) -> int:
        required = self.vertexes.required_starting_vertex
        if required is not None:
            return required
        if starting_vertex is not None:
            return min(max(starting_vertex, 0), self.num_vertexes - 1)
        return int(self.rng.integers(self.num_vertexes))

    def find_path(self, vertex: int, edges: Edges, path: Path) -> Optional[GeneratorError]:
        """
        Extend the path with vertex and search the rest of it.

        Returns:
            None once the path is complete, otherwise the reason of the failure
        """
        if self._trace:
            self.logger.debug(f"== Going to vertex {vertex} (iteration {self.iteration})")
        if vertex in path:
            return GeneratorError.NO_PATH
        path.push(vertex)

        if len(path) == self.num_vertexes:
            return None

        self._increment_iteration()
        if self._check_time_limit():
            return GeneratorError.DURATION_EXCEEDED

        # A required edge leaves no choice
        required = self._required_next(vertex, edges, path)
        if required is not None:
            if not self.set_status_adjacent(vertex, edges):
                if self._trace:
                    self.logger.debug(f"   Back: the edge {vertex}-{required} is not valid")
                path.pop()
                return GeneratorError.NO_PATH
            error = self.find_path(required, edges, path)
            if error == GeneratorError.NO_PATH:
                path.pop()
            return error

        candidates = self._next_vertexes(vertex, edges, path)
        self.rng.shuffle(candidates)
        for neighbour in candidates:
            if self._trace:
                self.logger.debug(f"   Selecting edge {vertex}-{neighbour}")
            new_edges = edges.copy()
            new_edges.set_status(vertex, neighbour, EdgeStatus.REQUIRED)
            edges.set_status(vertex, neighbour, EdgeStatus.DELETED)

            if not self.set_status_adjacent(vertex, new_edges):
                continue

            error = self.find_path(neighbour, new_edges, path)
            if error is None or error == GeneratorError.DURATION_EXCEEDED:
                return error

        path.pop()
        return GeneratorError.NO_PATH
