"""
Validator for Hexkudo cell graphs, solution paths and hints.
"""

from typing import List, Optional

import networkx as nx

from .diamond_and_map import DiamondAndMap
from .edges import EdgeStatus
from .path import Path
from .puzzle_parse import PuzzleParse


class ValidationResult:
    """Result of a validation"""

    def __init__(self):
        self.is_valid = True
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def add_error(self, error: str):
        """Add an error message"""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str):
        """Add a warning message"""
        self.warnings.append(warning)

    def merge(self, other: "ValidationResult"):
        for error in other.errors:
            self.add_error(error)
        self.warnings.extend(other.warnings)

    def __bool__(self):
        return self.is_valid

    def __repr__(self):
        status = "Valid" if self.is_valid else "Invalid"
        return f"ValidationResult({status}, {len(self.errors)} errors, {len(self.warnings)} warnings)"


class PathValidator:
    """Validates generated games against the cell graph"""

    @staticmethod
    def build_graph(parse: PuzzleParse) -> nx.Graph:
        """Undirected graph of the non-deleted edges of a built puzzle"""
        parse.build_edges()
        graph = nx.Graph()
        for vertex, position in parse.vertexes.positions().items():
            graph.add_node(vertex, pos=position)
        for vertex in parse.edges.vertexes():
            for neighbour in parse.edges.get_not_deleted_vertexes(vertex):
                graph.add_edge(vertex, neighbour,
                               status=parse.edges.get_status(vertex, neighbour))
        return graph

    @staticmethod
    def validate_graph(parse: PuzzleParse) -> ValidationResult:
        """Validate the cell graph of a puzzle template"""
        result = ValidationResult()
        graph = PathValidator.build_graph(parse)

        for vertex, degree in graph.degree():
            if not (1 <= degree <= 6):
                result.add_error(f"Vertex {vertex} has invalid degree {degree}")

        if graph.number_of_nodes() > 0 and not nx.is_connected(graph):
            components = nx.number_connected_components(graph)
            result.add_error(f"Cell graph is not connected ({components} components)")

        start = parse.required_starting_vertex
        if start is not None and graph.degree(start) != 1:
            result.add_error(f"Required starting vertex {start} has {graph.degree(start)} edges")

        articulation_points = list(nx.articulation_points(graph)) if graph.number_of_nodes() > 2 else []
        if articulation_points:
            result.add_warning(f"Cell graph has articulation points: {sorted(articulation_points)}")

        return result

    @staticmethod
    def validate_path(path: Path, parse: PuzzleParse, graph: Optional[nx.Graph] = None) -> ValidationResult:
        """Validate that a path is a Hamiltonian path of the cell graph"""
        result = ValidationResult()
        graph = graph if graph is not None else PathValidator.build_graph(parse)
        vertexes = path.get()

        if len(vertexes) != parse.num_vertexes:
            result.add_error(f"Path has {len(vertexes)} vertexes, puzzle has {parse.num_vertexes}")

        if len(set(vertexes)) != len(vertexes):
            duplicates = sorted({v for v in vertexes if vertexes.count(v) > 1})
            result.add_error(f"Path visits vertexes more than once: {duplicates}")

        for vertex in vertexes:
            if vertex not in graph:
                result.add_error(f"Path references non-existent vertex {vertex}")

        for vertex1, vertex2 in zip(vertexes, vertexes[1:]):
            if not graph.has_edge(vertex1, vertex2):
                result.add_error(f"Vertexes {vertex1} and {vertex2} are consecutive but not adjacent")

        start = parse.required_starting_vertex
        if start is not None and vertexes and start not in (vertexes[0], vertexes[-1]):
            result.add_error(f"Path does not start or end at the single-edge vertex {start}")

        return result

    @staticmethod
    def validate_diamond_and_map(diamond_and_map: DiamondAndMap, path: Path,
                                 parse: PuzzleParse) -> ValidationResult:
        """Validate hints against the solution path"""
        result = ValidationResult()
        graph = PathValidator.build_graph(parse)

        for vertex1, vertex2 in diamond_and_map.get_diamonds():
            if not graph.has_edge(vertex1, vertex2):
                result.add_error(f"Diamond {vertex1}<->{vertex2} joins non-adjacent vertexes")
                continue
            index1 = path.vertex_index(vertex1)
            index2 = path.vertex_index(vertex2)
            if index1 is None or index2 is None or abs(index1 - index2) != 1:
                result.add_error(f"Diamond {vertex1}<->{vertex2} does not join consecutive values")

        for vertex in diamond_and_map.get_map():
            if not (0 <= vertex < parse.num_vertexes):
                result.add_error(f"Map references non-existent vertex {vertex}")

        for endpoint in (path.get_first(), path.get_last()):
            if endpoint is not None and not diamond_and_map.is_map(endpoint):
                result.add_warning(f"Path endpoint {endpoint} is not a map cell")

        return result

    @staticmethod
    def validate_game(path: Path, diamond_and_map: DiamondAndMap, parse: PuzzleParse) -> ValidationResult:
        """Validate a complete game: the solution path and its hints"""
        result = PathValidator.validate_path(path, parse)
        result.merge(PathValidator.validate_diamond_and_map(diamond_and_map, path, parse))
        return result

    @staticmethod
    def get_graph_statistics(parse: PuzzleParse) -> dict:
        """Get various statistics about the cell graph"""
        graph = PathValidator.build_graph(parse)
        degrees = [degree for _, degree in graph.degree()]
        num_cells = parse.vertexes.width * parse.vertexes.height
        return {
            'width': parse.vertexes.width,
            'height': parse.vertexes.height,
            'num_vertexes': graph.number_of_nodes(),
            'num_edges': graph.number_of_edges(),
            'num_required': sum(1 for *_, s in graph.edges(data='status') if s == EdgeStatus.REQUIRED),
            'avg_degree': sum(degrees) / len(degrees) if degrees else 0,
            'min_degree': min(degrees, default=0),
            'max_degree': max(degrees, default=0),
            'density': graph.number_of_nodes() / num_cells if num_cells else 0,
            'required_starting_vertex': parse.required_starting_vertex,
            'num_logos': len(parse.vertexes.get_logo_coordinates()),
        }
