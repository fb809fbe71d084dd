"""
Ordered vertex path with constant time membership checks.
"""

from typing import Iterable, Iterator, List, Optional, Set


class Path:
    """Sequence of distinct vertexes; the value of a vertex is its 1-based position"""

    def __init__(self, vertexes: Optional[Iterable[int]] = None):
        self._path: List[int] = []
        self._visited: Set[int] = set()
        for vertex in vertexes or ():
            self.push(vertex)

    @classmethod
    def from_list(cls, vertexes: Iterable[int]) -> "Path":
        """Build a path from precomputed data (sample games)"""
        return cls(vertexes)

    def push(self, vertex: int):
        self._path.append(vertex)
        self._visited.add(vertex)

    def pop(self) -> Optional[int]:
        """Remove and return the last vertex, None on an empty path"""
        if not self._path:
            return None
        vertex = self._path.pop()
        self._visited.discard(vertex)
        return vertex

    def clear(self):
        self._path.clear()
        self._visited.clear()

    def contains(self, vertex: int) -> bool:
        return vertex in self._visited

    def get(self) -> List[int]:
        return list(self._path)

    def vertex_index(self, vertex: int) -> Optional[int]:
        """0-based position of a vertex in the path"""
        if vertex not in self._visited:
            return None
        return self._path.index(vertex)

    def get_first(self) -> Optional[int]:
        return self._path[0] if self._path else None

    def get_last(self) -> Optional[int]:
        return self._path[-1] if self._path else None

    def get_vertex_from_value(self, value: int) -> Optional[int]:
        """Vertex holding the given value (values start at 1)"""
        if 1 <= value <= len(self._path):
            return self._path[value - 1]
        return None

    def copy(self) -> "Path":
        return Path(self._path)

    def __len__(self) -> int:
        return len(self._path)

    def __contains__(self, vertex: int) -> bool:
        return vertex in self._visited

    def __iter__(self) -> Iterator[int]:
        return iter(self._path)

    def __getitem__(self, index):
        return self._path[index]

    def __eq__(self, other):
        if isinstance(other, Path):
            return self._path == other._path
        if isinstance(other, list):
            return self._path == other
        return False

    def __repr__(self):
        return f"Path({self._path})"
