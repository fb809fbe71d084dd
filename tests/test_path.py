"""
Path container.
"""

from hexkudo.core.path import Path


def test_push_pop_and_membership():
    path = Path()
    path.push(4)
    path.push(7)
    assert len(path) == 2
    assert 7 in path
    assert path.contains(4)

    assert path.pop() == 7
    assert 7 not in path
    assert path.get() == [4]


def test_pop_on_empty_path():
    path = Path()
    assert path.pop() is None
    assert path.get_first() is None
    assert path.get_last() is None


def test_values_start_at_one():
    path = Path.from_list([5, 3, 8])
    assert path.get_vertex_from_value(1) == 5
    assert path.get_vertex_from_value(3) == 8
    assert path.get_vertex_from_value(0) is None
    assert path.get_vertex_from_value(4) is None
    assert path.vertex_index(3) == 1
    assert path.vertex_index(9) is None


def test_from_list_fills_membership():
    path = Path.from_list([2, 0, 1])
    assert all(v in path for v in (0, 1, 2))
    assert path.get_first() == 2
    assert path.get_last() == 1


def test_equality_uses_order():
    assert Path([1, 2, 3]) == Path([1, 2, 3])
    assert Path([1, 2, 3]) != Path([3, 2, 1])
    assert Path([1, 2]) == [1, 2]


def test_copy_and_clear():
    path = Path([1, 2, 3])
    clone = path.copy()
    path.clear()
    assert len(path) == 0
    assert 1 not in path
    assert clone.get() == [1, 2, 3]
