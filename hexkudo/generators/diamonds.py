"""
Diamond hints making a path the unique solution of its puzzle.

Every join of the path starts as a diamond. The joins are visited in random
order; a diamond is dropped when no other full path exists without it (and
without the diamonds already dropped), and kept otherwise. The surviving
diamonds are then reduced to map cells where possible.
"""

from typing import List, Optional, Tuple

import numpy as np

from ..core.diamond_and_map import DiamondAndMap
from ..core.edges import Edges, EdgeStatus
from ..core.path import Path
from ..core.vertexes import Vertexes
from .base_generator import BaseGenerator, GeneratorConfig, GeneratorError, GeneratorResult


class DiamondGenerator(BaseGenerator):
    """Select the diamonds and maps of a puzzle from its solution path"""

    def __init__(self, edges: Edges, path: Path,
                 config: Optional[GeneratorConfig] = None,
                 rng: Optional[np.random.Generator] = None):
        """
        Initialize the diamond search.

        Args:
            edges: Edge store of the puzzle, left untouched by the search
            path: Solution path
            config: Search configuration
            rng: Random generator
        """
        super().__init__(config, rng)
        self.path = path.copy()
        self.num_vertexes = len(path)
        self.starting_vertex = path.get_first()
        self.ending_vertex = path.get_last()
        self.wpath = Path()

        # Every join of the path is a diamond to begin with
        self.edges = edges.copy()
        vertexes = self.path.get()
        for vertex1, vertex2 in zip(vertexes, vertexes[1:]):
            self.edges.set_status(vertex1, vertex2, EdgeStatus.REQUIRED)

    @property
    def endpoints(self):
        return self.starting_vertex, self.ending_vertex

    def generate_diamonds(self, vertexes: Vertexes) -> GeneratorResult:
        """
        Select the required diamonds, then reduce them to map cells.

        Args:
            vertexes: Cell graph, used by the map reduction

        Returns:
            GeneratorResult holding the DiamondAndMap on success
        """
        if self.num_vertexes == 0:
            return GeneratorResult(success=False, error=GeneratorError.NO_PATH,
                                   message="Cannot place diamonds on an empty path")

        diamond_and_map = DiamondAndMap(self.num_vertexes, self.starting_vertex, self.ending_vertex)
        removed: List[Tuple[int, int]] = []
        path = self.path.get()

        order = list(range(self.num_vertexes - 1))
        self.rng.shuffle(order)
        if self._trace:
            self.logger.debug(f"Finding unique path for {path}, start {self.starting_vertex}, "
                              f"end {self.ending_vertex}, diamond order {order}")

        self._start_clock()
        for index in order:
            vertex1, vertex2 = path[index], path[index + 1]
            if self._trace:
                self.logger.debug(f"=== deleting diamond {vertex1} <> {vertex2}")
            removed.append((vertex1, vertex2))

            edges = self.edges.copy()
            for a, b in removed:
                edges.set_status(a, b, EdgeStatus.UNDECIDED)

            # Narrow the alternate path search; contradictions show up during the search
            for vertex in path:
                self.set_status_adjacent(vertex, edges)

            self.wpath.clear()
            error = self.is_there_another_path(self.starting_vertex, edges)
            if error is None:
                if self._trace:
                    self.logger.debug(f"    requiring diamond {vertex1} <> {vertex2}")
                removed.pop()
                diamond_and_map.insert(vertex1, vertex2)
            elif error == GeneratorError.DURATION_EXCEEDED:
                self._stop_clock()
                self.logger.debug(f"Diamond search exceeded {self.config.time_limit}s "
                                  f"after {self.iteration} iterations")
                return GeneratorResult(success=False, path=self.path.copy(), error=error,
                                       iterations=self.iteration, duration=self.duration,
                                       message=f"Time limit of {self.config.time_limit}s exceeded")
        self._stop_clock()

        num_diamonds = diamond_and_map.num_diamonds
        diamond_and_map.compute(vertexes)
        self.logger.debug(f"Diamonds found in {self.duration:.3f}s with {self.iteration} iterations: "
                          f"{num_diamonds} required, {diamond_and_map.num_diamonds} after reduction")

        return GeneratorResult(success=True, path=self.path.copy(), diamond_and_map=diamond_and_map,
                               iterations=self.iteration, duration=self.duration,
                               message="Diamonds found",
                               stats={'required_diamonds': num_diamonds,
                                      'num_diamonds': diamond_and_map.num_diamonds,
                                      'num_maps': diamond_and_map.num_maps})

    def is_there_another_path(self, vertex: int, edges: Edges) -> Optional[GeneratorError]:
        """
        Search a full path from the start to the end vertex that differs from
        the solution path.

        Returns:
            None when such a path exists, otherwise the reason of the failure
        """
        if self._trace:
            self.logger.debug(f"== Going to vertex {vertex} (iteration {self.iteration})")
        if vertex in self.wpath:
            return GeneratorError.NO_PATH
        self.wpath.push(vertex)

        if vertex == self.ending_vertex:
            if len(self.wpath) != self.num_vertexes or self.wpath == self.path:
                self.wpath.pop()
                return GeneratorError.NO_PATH
            if self._trace:
                self.logger.debug(f"   alternate path found: {self.wpath.get()}")
            return None

        self._increment_iteration()
        if self._check_time_limit():
            return GeneratorError.DURATION_EXCEEDED

        # Follow the diamond
        required = self._required_next(vertex, edges, self.wpath)
        if required is not None:
            if not self.set_status_adjacent(vertex, edges):
                self.wpath.pop()
                return GeneratorError.NO_PATH
            error = self.is_there_another_path(required, edges)
            if error == GeneratorError.NO_PATH:
                self.wpath.pop()
            return error

        for neighbour in self._next_vertexes(vertex, edges, self.wpath):
            new_edges = edges.copy()
            new_edges.set_status(vertex, neighbour, EdgeStatus.REQUIRED)
            edges.set_status(vertex, neighbour, EdgeStatus.DELETED)

            if not self.set_status_adjacent(vertex, new_edges):
                continue

            error = self.is_there_another_path(neighbour, new_edges)
            if error is None or error == GeneratorError.DURATION_EXCEEDED:
                return error

        self.wpath.pop()
        return GeneratorError.NO_PATH
