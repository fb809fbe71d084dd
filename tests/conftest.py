import os
import sys

import numpy as np
import pytest

# Add project root to sys.path (so tests can import hexkudo.*)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(PROJECT_ROOT)

from hexkudo.core.puzzle import Difficulty, Puzzle, PuzzleSampleGame
from hexkudo.core.puzzle_parse import PuzzleParse
from hexkudo.puzzles import easy_classic_22


# 0 1
#  2
#   3      <- only cell with a single neighbour
FORCED_START_TEMPLATE = """
o o
 o
  o
"""

#  0 1 2
# 3 4 5 6
#  7 8 9
SMALL_TEMPLATE = """
 o o o
o o o o
 o o o
"""

# Two triangles without any link between them
DISCONNECTED_TEMPLATE = """
o o      o o
 o        o
"""

SMALL_SAMPLE = PuzzleSampleGame(
    path=[0, 1, 2, 6, 5, 4, 3, 7, 8, 9],
    diamonds=[(5, 4), (3, 7)],
    maps=[0, 2, 9],
)


@pytest.fixture
def classic_parse():
    parse = PuzzleParse(easy_classic_22.TEMPLATE)
    parse.build_edges()
    return parse


@pytest.fixture
def small_parse():
    parse = PuzzleParse(SMALL_TEMPLATE)
    parse.build_edges()
    return parse


@pytest.fixture
def forced_parse():
    parse = PuzzleParse(FORCED_START_TEMPLATE)
    parse.build_edges()
    return parse


@pytest.fixture
def small_puzzle():
    return Puzzle("Small", Difficulty.EASY, SMALL_TEMPLATE, [SMALL_SAMPLE])


@pytest.fixture
def forced_puzzle():
    sample = PuzzleSampleGame(path=[3, 2, 0, 1], diamonds=[], maps=[1, 3])
    return Puzzle("Forced", Difficulty.EASY, FORCED_START_TEMPLATE, [sample])


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def count_solutions():
    """
    Returns a function counting the full paths consistent with the hints:
    map cells keep the value they have in the solution path and diamond ends
    hold consecutive values. Counting stops at limit.
    """
    def _count(parse, diamond_and_map, path, limit=2):
        num_vertexes = parse.num_vertexes
        adjacency = {v: set(parse.vertexes.get_adjacent(v).vertexes()) for v in range(num_vertexes)}
        position_of_map = {v: path.vertex_index(v) for v in diamond_and_map.get_map()}
        vertex_at = {position: v for v, position in position_of_map.items()}
        partners = {v: set() for v in range(num_vertexes)}
        for a, b in diamond_and_map.get_diamonds():
            partners[a].add(b)
            partners[b].add(a)

        found = 0

        def diamonds_ok(route, allow_pending):
            # The diamond partners of the last vertex must be its previous or next vertex
            last = route[-1]
            previous = route[-2] if len(route) > 1 else None
            missing = [p for p in partners[last] if p != previous]
            return len(missing) == 0 or (allow_pending and len(missing) == 1 and missing[0] not in route)

        def extend(route, visited):
            nonlocal found
            if found >= limit:
                return
            position = len(route)
            if position == num_vertexes:
                if diamonds_ok(route, allow_pending=False):
                    found += 1
                return

            if position in vertex_at:
                candidates = [vertex_at[position]]
            elif route:
                candidates = adjacency[route[-1]]
            else:
                candidates = range(num_vertexes)

            for vertex in candidates:
                if vertex in visited:
                    continue
                if route and vertex not in adjacency[route[-1]]:
                    continue
                if vertex in position_of_map and position_of_map[vertex] != position:
                    continue
                if route:
                    last = route[-1]
                    previous = route[-2] if len(route) > 1 else None
                    if any(p not in (previous, vertex) for p in partners[last]):
                        continue
                route.append(vertex)
                visited.add(vertex)
                if diamonds_ok(route, allow_pending=True):
                    extend(route, visited)
                route.pop()
                visited.discard(vertex)

        extend([], set())
        return found

    return _count
