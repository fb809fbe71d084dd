"""
Base class of the path and diamond searches: configuration, results, time
budget and the edge status propagation they share.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path as FilePath
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ..config import MAX_TIME_SEC
from ..core.diamond_and_map import DiamondAndMap
from ..core.edges import Edges, EdgeStatus
from ..core.path import Path
from ..core.utils import setup_logger


class GeneratorError(Enum):
    """Why a search gave up"""
    NO_PATH = "no_path"
    DURATION_EXCEEDED = "duration_exceeded"


@dataclass
class GeneratorConfig:
    """Configuration for the generation searches"""
    time_limit: float = MAX_TIME_SEC  # seconds
    random_seed: Optional[int] = None
    verbose: bool = False
    log_file: Optional[FilePath] = None


@dataclass
class GeneratorResult:
    """Result of a generation search"""
    success: bool
    path: Optional[Path] = None
    diamond_and_map: Optional[DiamondAndMap] = None
    error: Optional[GeneratorError] = None
    iterations: int = 0
    duration: float = 0.0
    message: str = ""
    stats: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self):
        status = "Success" if self.success else f"Failed({self.error.value if self.error else 'unknown'})"
        return f"GeneratorResult({status}, time={self.duration:.3f}s, iterations={self.iterations})"


class BaseGenerator(ABC):
    """Abstract base class of the depth-first searches over an edge store"""

    # Reject promotions to REQUIRED that would close a cycle
    detect_loops = False

    def __init__(self, config: Optional[GeneratorConfig] = None,
                 rng: Optional[np.random.Generator] = None):
        """
        Initialize the search.

        Args:
            config: Search configuration
            rng: Random generator; when omitted one is seeded from config.random_seed
        """
        self.config = config or GeneratorConfig()
        self.logger = setup_logger(
            self.__class__.__name__,
            self.config.log_file,
            "DEBUG" if self.config.verbose else "INFO"
        )
        self.rng = rng if rng is not None else np.random.default_rng(self.config.random_seed)

        # Statistics tracking
        self.iteration = 0
        self.duration = 0.0
        self._start_time: Optional[float] = None
        self._trace = self.logger.isEnabledFor(logging.DEBUG)

    @property
    @abstractmethod
    def endpoints(self) -> Tuple[int, ...]:
        """Vertexes that end the path and therefore keep a single required edge"""
        pass

    def _start_clock(self):
        self.iteration = 0
        self.duration = 0.0
        self._start_time = time.monotonic()

    def _stop_clock(self):
        self.duration = self._elapsed()

    def _elapsed(self) -> float:
        if self._start_time is None:
            return 0.0
        return time.monotonic() - self._start_time

    def _check_time_limit(self) -> bool:
        """Check if the time budget has been spent"""
        return self._elapsed() >= self.config.time_limit

    def _increment_iteration(self):
        self.iteration += 1

    def set_status_adjacent(self, vertex: int, edges: Edges) -> bool:
        """
        Propagate the edge statuses around a vertex, then around every vertex
        whose edges changed.

        An endpoint holding a required edge loses its undecided edges. Any other
        vertex fails with more than two required edges or no edge left, loses its
        undecided edges once two are required, and gets its remaining edges
        required when at most two are left.

        Args:
            vertex: Vertex whose edges changed
            edges: Edge store, modified in place

        Returns:
            False if the store became contradictory
        """
        to_update: List[int] = []

        if vertex in self.endpoints:
            if edges.num_status(vertex, EdgeStatus.REQUIRED) > 0:
                for neighbour in edges.get_vertexes(vertex, EdgeStatus.UNDECIDED):
                    edges.set_status(vertex, neighbour, EdgeStatus.DELETED)
                    to_update.append(neighbour)
                    if self._trace:
                        self.logger.debug(f"    Edge {vertex}-{neighbour} deleted")
                for neighbour in to_update:
                    if not self.set_status_adjacent(neighbour, edges):
                        return False
            return True

        num_required = edges.num_status(vertex, EdgeStatus.REQUIRED)
        num_edges = edges.num_edges(vertex)

        if num_required > 2:
            if self._trace:
                self.logger.debug(f"    Vertex {vertex} has too many ({num_required}) required edges")
            return False

        if num_edges == 0:
            if self._trace:
                self.logger.debug(f"    Vertex {vertex} has no edges")
            return False

        if num_required == 2:
            for neighbour in edges.get_vertexes(vertex, EdgeStatus.UNDECIDED):
                edges.set_status(vertex, neighbour, EdgeStatus.DELETED)
                to_update.append(neighbour)
                if self._trace:
                    self.logger.debug(f"    Edge {vertex}-{neighbour} deleted")
        elif num_edges <= 2:
            for neighbour in edges.get_vertexes(vertex, EdgeStatus.UNDECIDED):
                edges.set_status(vertex, neighbour, EdgeStatus.REQUIRED)
                to_update.append(neighbour)
                if self.detect_loops and self.is_loop(vertex, neighbour, edges, vertex):
                    if self._trace:
                        self.logger.debug(f"    Loop detected from vertex {vertex}")
                    return False
                if self._trace:
                    self.logger.debug(f"    Edge {vertex}-{neighbour} required")

        for neighbour in to_update:
            if not self.set_status_adjacent(neighbour, edges):
                return False
        return True

    @staticmethod
    def is_loop(previous: int, vertex: int, edges: Edges, start: int) -> bool:
        """
        Follow the required edges from vertex without stepping back to previous.

        Returns:
            True if the walk reaches start again
        """
        stack = [(previous, vertex)]
        seen = set()
        while stack:
            previous, vertex = stack.pop()
            if vertex in seen:
                continue
            seen.add(vertex)
            for neighbour in edges.get_vertexes(vertex, EdgeStatus.REQUIRED):
                if neighbour == previous:
                    continue
                if neighbour == start:
                    return True
                stack.append((vertex, neighbour))
        return False

    def _next_vertexes(self, vertex: int, edges: Edges, path: Path) -> List[int]:
        """Unvisited neighbours reachable through an undecided edge"""
        return [v for v in edges.get_vertexes(vertex, EdgeStatus.UNDECIDED) if v not in path]

    def _required_next(self, vertex: int, edges: Edges, path: Path) -> Optional[int]:
        """First unvisited neighbour joined by a required edge"""
        for neighbour in edges.get_vertexes(vertex, EdgeStatus.REQUIRED):
            if neighbour not in path:
                return neighbour
        return None
