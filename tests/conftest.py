import matplotlib

matplotlib.use("Agg")

import pytest

from graph import Graph


@pytest.fixture
def path_graph():
    """0 - 1 - 2 - 3 laid out as a 1x4 corridor."""
    graph = Graph()
    for v in range(4):
        graph.add_vertex(v)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    graph.add_edge(2, 3)
    return graph


@pytest.fixture
def square_tree():
    """
    2x2 grid tree:

        0 - 1
            |
        2 - 3
    """
    graph = Graph()
    for v in range(4):
        graph.add_vertex(v)
    graph.add_edge(0, 1)
    graph.add_edge(1, 3)
    graph.add_edge(3, 2)
    return graph
