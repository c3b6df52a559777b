# utils.py
from typing import Sequence

from disjoint_set import DisjointSet
from graph import Graph


def _replay_edges(graph: Graph):
    """
    Replays every edge through a fresh DisjointSet over the graph's vertices.

    Returns (disjoint_set, found_cycle). Vertices are relabelled 0..n-1 so
    graphs whose labels are not contiguous still work.
    """
    labels = {vertex: i for i, vertex in enumerate(graph.vertices())}
    disjoint_set = DisjointSet(max(1, len(labels)))
    found_cycle = False
    for a, b in graph.edges():
        la, lb = labels[a], labels[b]
        if disjoint_set.same_set(la, lb):
            found_cycle = True
        else:
            disjoint_set.union(la, lb)
    return disjoint_set, found_cycle


def count_components(graph: Graph) -> int:
    """Counts connected classes of the graph, computed independently of generation."""
    if graph.vertex_size() == 0:
        return 0
    disjoint_set, _ = _replay_edges(graph)
    return disjoint_set.set_count()


def is_spanning_tree(graph: Graph) -> bool:
    """Checks the graph is connected, acyclic and has exactly V - 1 edges."""
    if graph.vertex_size() == 0:
        return False
    if graph.edge_size() != graph.vertex_size() - 1:
        return False
    disjoint_set, found_cycle = _replay_edges(graph)
    return not found_cycle and disjoint_set.set_count() == 1


def path_follows_edges(graph: Graph, trail: Sequence[int]) -> bool:
    """Checks that each consecutive pair of cells in trail is joined by a passage."""
    return all(graph.contains_edge(a, b) for a, b in zip(trail, trail[1:]))
