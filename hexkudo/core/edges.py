"""
Tri-state edge store shared by the path and diamond searches.
"""

from enum import Enum
from typing import Dict, Iterable, List, Optional


class EdgeStatus(Enum):
    """Decision state of an edge between two adjacent cells"""
    UNDECIDED = "undecided"
    REQUIRED = "required"
    DELETED = "deleted"


_DEBUG_SYMBOLS = {
    EdgeStatus.UNDECIDED: "?",
    EdgeStatus.REQUIRED: "=",
    EdgeStatus.DELETED: "x",
}


class Edges:
    """
    Per-vertex ordered mapping of neighbour -> EdgeStatus.

    Both directions of an edge are stored and always updated together, so
    get_status(a, b) == get_status(b, a) for every known edge.
    """

    def __init__(self):
        self._edges: Dict[int, Dict[int, EdgeStatus]] = {}

    def push_from_array(self, vertex: int, neighbours: Iterable[int],
                        status: EdgeStatus = EdgeStatus.UNDECIDED):
        """Register the neighbours of a vertex, all with the same status"""
        self._edges[vertex] = {neighbour: status for neighbour in neighbours}

    def clear(self):
        self._edges.clear()

    def copy(self) -> "Edges":
        new_edges = Edges()
        new_edges._edges = {vertex: dict(neighbours) for vertex, neighbours in self._edges.items()}
        return new_edges

    def set_status(self, vertex1: int, vertex2: int, status: EdgeStatus):
        """Set the status of an edge in both directions; unknown edges are ignored"""
        for a, b in ((vertex1, vertex2), (vertex2, vertex1)):
            neighbours = self._edges.get(a)
            if neighbours is not None and b in neighbours:
                neighbours[b] = status

    def get_status(self, vertex1: int, vertex2: int) -> Optional[EdgeStatus]:
        return self._edges.get(vertex1, {}).get(vertex2)

    def get_vertexes(self, vertex: int, status: EdgeStatus) -> List[int]:
        """Neighbours of a vertex whose edge has the given status"""
        return [n for n, s in self._edges.get(vertex, {}).items() if s == status]

    def get_not_deleted_vertexes(self, vertex: int) -> List[int]:
        return [n for n, s in self._edges.get(vertex, {}).items() if s != EdgeStatus.DELETED]

    def num_status(self, vertex: int, status: EdgeStatus) -> int:
        return sum(1 for s in self._edges.get(vertex, {}).values() if s == status)

    def num_edges(self, vertex: int) -> int:
        """Number of edges of a vertex that are not DELETED"""
        return sum(1 for s in self._edges.get(vertex, {}).values() if s != EdgeStatus.DELETED)

    def vertexes(self) -> List[int]:
        return list(self._edges)

    def debug_lines(self) -> List[str]:
        """One line per vertex: '3: 0? 4= 7x' (? undecided, = required, x deleted)"""
        return [
            f"{vertex}: " + " ".join(f"{n}{_DEBUG_SYMBOLS[s]}" for n, s in neighbours.items())
            for vertex, neighbours in self._edges.items()
        ]

    def __len__(self) -> int:
        return len(self._edges)

    def __contains__(self, vertex: int) -> bool:
        return vertex in self._edges

    def __eq__(self, other):
        if isinstance(other, Edges):
            return self._edges == other._edges
        return False

    def __repr__(self):
        num_edges = sum(len(n) for n in self._edges.values()) // 2
        return f"Edges({len(self._edges)} vertexes, {num_edges} edges)"
