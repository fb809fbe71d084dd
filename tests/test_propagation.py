"""
Edge status propagation shared by the searches.
"""

from hexkudo.core.edges import Edges, EdgeStatus
from hexkudo.core.path import Path
from hexkudo.core.vertexes import Vertexes
from hexkudo.generators.base_generator import BaseGenerator
from hexkudo.generators.diamonds import DiamondGenerator
from hexkudo.generators.random_path import RandomPath


def make_edges(adjacency):
    edges = Edges()
    for vertex, neighbours in adjacency.items():
        edges.push_from_array(vertex, neighbours)
    return edges


def make_random_path(edges, starting_vertex=None):
    vertexes = Vertexes("")
    vertexes.build()
    generator = RandomPath(edges, vertexes)
    generator.starting_vertex = starting_vertex
    return generator


def test_too_many_required_edges_fails():
    edges = make_edges({0: [1, 2, 3], 1: [0], 2: [0], 3: [0]})
    for neighbour in (1, 2, 3):
        edges.set_status(0, neighbour, EdgeStatus.REQUIRED)
    assert not make_random_path(edges).set_status_adjacent(0, edges)


def test_no_edge_left_fails():
    edges = make_edges({0: [1, 2], 1: [0, 2], 2: [0, 1]})
    edges.set_status(0, 1, EdgeStatus.DELETED)
    edges.set_status(0, 2, EdgeStatus.DELETED)
    assert not make_random_path(edges).set_status_adjacent(0, edges)


def test_two_required_edges_delete_the_others():
    edges = make_edges({0: [1, 2, 3], 1: [0], 2: [0], 3: [0, 4], 4: [3]})
    edges.set_status(0, 1, EdgeStatus.REQUIRED)
    edges.set_status(0, 2, EdgeStatus.REQUIRED)

    assert make_random_path(edges).set_status_adjacent(0, edges)
    assert edges.get_status(0, 3) == EdgeStatus.DELETED
    # 3 is left with a single edge, which becomes required
    assert edges.get_status(3, 4) == EdgeStatus.REQUIRED


def test_two_edges_left_become_required():
    edges = make_edges({0: [1, 2], 1: [0, 2, 3], 2: [0, 1, 3], 3: [1, 2]})

    assert make_random_path(edges).set_status_adjacent(0, edges)
    assert edges.get_status(0, 1) == EdgeStatus.REQUIRED
    assert edges.get_status(0, 2) == EdgeStatus.REQUIRED
    assert edges.get_status(1, 3) == EdgeStatus.UNDECIDED


def test_promotion_closing_a_cycle_fails_for_random_path():
    edges = make_edges({0: [1, 2], 1: [0, 2], 2: [0, 1]})
    edges.set_status(1, 2, EdgeStatus.REQUIRED)
    assert not make_random_path(edges).set_status_adjacent(0, edges)


def test_diamond_search_does_not_check_cycles():
    edges = make_edges({0: [1, 2], 1: [0, 2], 2: [0, 1]})
    edges.set_status(1, 2, EdgeStatus.REQUIRED)
    generator = DiamondGenerator(Edges(), Path([5]))
    assert not generator.detect_loops
    assert generator.set_status_adjacent(0, edges)
    assert edges.num_status(0, EdgeStatus.REQUIRED) == 2


def test_is_loop():
    edges = make_edges({0: [1, 2], 1: [0, 2], 2: [0, 1]})
    edges.set_status(0, 1, EdgeStatus.REQUIRED)
    edges.set_status(1, 2, EdgeStatus.REQUIRED)
    assert not BaseGenerator.is_loop(0, 1, edges, 0)
    edges.set_status(2, 0, EdgeStatus.REQUIRED)
    assert BaseGenerator.is_loop(0, 1, edges, 0)


def test_start_vertex_keeps_a_single_edge():
    edges = make_edges({0: [1, 2, 3], 1: [0], 2: [0, 4], 3: [0, 4], 4: [2, 3]})
    edges.set_status(0, 1, EdgeStatus.REQUIRED)

    assert make_random_path(edges, starting_vertex=0).set_status_adjacent(0, edges)
    assert edges.get_status(0, 2) == EdgeStatus.DELETED
    assert edges.get_status(0, 3) == EdgeStatus.DELETED
    assert edges.get_status(2, 4) == EdgeStatus.REQUIRED
    assert edges.get_status(3, 4) == EdgeStatus.REQUIRED


def test_start_vertex_without_required_edge_is_left_alone():
    edges = make_edges({0: [1, 2], 1: [0, 2], 2: [0, 1]})
    assert make_random_path(edges, starting_vertex=0).set_status_adjacent(0, edges)
    assert edges.num_status(0, EdgeStatus.UNDECIDED) == 2


def test_diamond_end_vertex_is_an_endpoint():
    generator = DiamondGenerator(Edges(), Path([3, 1, 4]))
    assert generator.endpoints == (3, 4)
