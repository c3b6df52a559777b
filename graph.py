# graph.py
from typing import Dict, FrozenSet, Iterator, List, Set, Tuple

from errors import UnknownVertexError


class Graph:
    """
    Undirected graph over integer cell indices.

    An edge (a, b) is an open passage between two cells. Adjacency lists keep
    the order edges were added, which fixes the visiting order of BFS/DFS.
    """

    def __init__(self):
        self._adjacency: Dict[int, List[int]] = {}
        self._edges: Set[FrozenSet[int]] = set()
        self._edge_order: List[Tuple[int, int]] = []

    def add_vertex(self, vertex: int):
        """Registers a vertex. Adding an existing vertex does nothing."""
        if vertex not in self._adjacency:
            self._adjacency[vertex] = []

    def add_edge(self, a: int, b: int):
        """Creates a passage between a and b. Both must already be vertices."""
        for vertex in (a, b):
            if vertex not in self._adjacency:
                raise UnknownVertexError(f"Vertex {vertex} is not in the graph.")
        pair = frozenset((a, b))
        if pair in self._edges:
            return
        self._edges.add(pair)
        self._edge_order.append((a, b))
        self._adjacency[a].append(b)
        if a != b:
            self._adjacency[b].append(a)

    def contains_edge(self, a: int, b: int) -> bool:
        """
        Checks for a passage between a and b in either orientation.

        Never raises: indices outside the grid (e.g. -1 from a boundary cell)
        simply have no edges.
        """
        return frozenset((a, b)) in self._edges

    def get_adjacent_vertices(self, vertex: int) -> List[int]:
        """Returns the neighbours of vertex in edge insertion order."""
        if vertex not in self._adjacency:
            raise UnknownVertexError(f"Vertex {vertex} is not in the graph.")
        return list(self._adjacency[vertex])

    def vertex_size(self) -> int:
        return len(self._adjacency)

    def edge_size(self) -> int:
        return len(self._edges)

    def vertices(self) -> Iterator[int]:
        yield from self._adjacency

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Yields edges as (a, b) in the order they were added."""
        yield from self._edge_order

    def __contains__(self, vertex: int) -> bool:
        return vertex in self._adjacency

    def __eq__(self, other):
        return (
            isinstance(other, Graph)
            and self._adjacency == other._adjacency
            and self._edge_order == other._edge_order
        )

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_size()}, edges={self.edge_size()})"
