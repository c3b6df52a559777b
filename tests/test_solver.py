"""Tests for solver.py"""

import pytest

import constants as const
from errors import NoPathFoundError
from graph import Graph
from maze_gen import generate_maze
from solver import bfs_parent_map, dfs_parent_map, solve_maze, trace_back
from utils import path_follows_edges


def _recursive_dfs(graph, start=0, drop_on_revisit=True):
    """Straightforward recursive form the iterative DFS must agree with."""
    seen = set()
    path = {}

    def visit(current):
        if current not in seen:
            seen.add(current)
            for vertex in graph.get_adjacent_vertices(current):
                visit(vertex)
                path[vertex] = current
        elif drop_on_revisit:
            path.pop(current, None)

    visit(start)
    return path


@pytest.fixture
def square_cycle():
    """2x2 grid with every passage open: 0-1, 1-3, 3-2, 2-0."""
    graph = Graph()
    for v in range(4):
        graph.add_vertex(v)
    graph.add_edge(0, 1)
    graph.add_edge(1, 3)
    graph.add_edge(3, 2)
    graph.add_edge(2, 0)
    return graph


class TestBfs:
    def test_standard_parent_map(self, square_tree):
        assert bfs_parent_map(square_tree) == {1: 0, 3: 1, 2: 3}

    def test_legacy_matches_standard_on_tree(self, square_tree):
        assert bfs_parent_map(square_tree, legacy=True) == bfs_parent_map(square_tree)

    def test_legacy_rule_on_cycle(self, square_cycle):
        # Cell 3 is reached twice and its last seen neighbour wins
        assert bfs_parent_map(square_cycle, legacy=True) == {1: 0, 2: 0, 3: 2}
        assert bfs_parent_map(square_cycle) == {1: 0, 2: 0, 3: 1}

    def test_origin_has_no_entry(self, path_graph):
        assert 0 not in bfs_parent_map(path_graph)
        assert 0 not in bfs_parent_map(path_graph, legacy=True)


class TestDfs:
    def test_parent_map_on_tree(self, square_tree):
        # Revisits write transient entries; only the origin's survives and is never followed
        assert dfs_parent_map(square_tree) == {0: 1, 1: 0, 3: 1, 2: 3}

    def test_matches_recursive_form_on_cycle(self, square_cycle):
        assert dfs_parent_map(square_cycle) == _recursive_dfs(square_cycle)

    @pytest.mark.parametrize("seed", range(5))
    def test_matches_recursive_form_on_mazes(self, seed):
        graph = generate_maze(9, 11, seed=seed)
        assert dfs_parent_map(graph) == _recursive_dfs(graph)

    @pytest.mark.parametrize("seed", range(5))
    def test_drop_on_revisit_does_not_change_trail(self, seed):
        graph = generate_maze(8, 8, seed=seed)
        with_drop = _recursive_dfs(graph, drop_on_revisit=True)
        without_drop = _recursive_dfs(graph, drop_on_revisit=False)
        assert trace_back(with_drop, 63) == trace_back(without_drop, 63)

    def test_deep_corridor_does_not_recurse(self):
        n = 5000
        graph = Graph()
        for v in range(n):
            graph.add_vertex(v)
        for v in range(n - 1):
            graph.add_edge(v, v + 1)
        trail = trace_back(dfs_parent_map(graph), n - 1)
        assert trail == list(range(n - 1, -1, -1))


class TestTraceBack:
    def test_walks_to_origin(self):
        assert trace_back({1: 0, 2: 1, 3: 2}, 3) == [3, 2, 1, 0]

    def test_goal_is_origin(self):
        assert trace_back({}, 0) == [0]

    def test_missing_entry(self):
        with pytest.raises(NoPathFoundError):
            trace_back({3: 2}, 3)

    def test_loop(self):
        with pytest.raises(NoPathFoundError):
            trace_back({3: 2, 2: 3}, 3)

    def test_is_a_lookup_error(self):
        with pytest.raises(LookupError):
            trace_back({}, 5)


class TestSolveMaze:
    @pytest.mark.parametrize("strategy", const.STRATEGIES)
    def test_corridor(self, path_graph, strategy):
        assert solve_maze(path_graph, 1, 4, strategy=strategy) == [3, 2, 1, 0]

    def test_two_by_two_dfs(self):
        graph = generate_maze(2, 2, seed=0)
        trail = solve_maze(graph, 2, 2, strategy=const.STRATEGY_DFS)
        assert trail[0] == 3
        assert trail[-1] == 0
        assert path_follows_edges(graph, trail)

    @pytest.mark.parametrize("rows, cols", [(1, 1), (3, 1), (1, 3), (6, 9), (15, 15)])
    def test_all_strategies_agree_on_perfect_maze(self, rows, cols):
        graph = generate_maze(rows, cols, seed=21)
        total = rows * cols
        trails = [
            solve_maze(graph, rows, cols, strategy=const.STRATEGY_BFS),
            solve_maze(graph, rows, cols, strategy=const.STRATEGY_BFS, legacy_bfs=True),
            solve_maze(graph, rows, cols, strategy=const.STRATEGY_DFS),
        ]
        for trail in trails:
            assert trail[0] == total - 1
            assert trail[-1] == 0
            assert len(set(trail)) == len(trail)
            assert path_follows_edges(graph, trail)
        assert trails[0] == trails[1] == trails[2]

    def test_unknown_strategy(self, path_graph):
        with pytest.raises(ValueError):
            solve_maze(path_graph, 1, 4, strategy="A*")

    def test_grid_mismatch(self, path_graph):
        with pytest.raises(ValueError):
            solve_maze(path_graph, 2, 4)

    def test_disconnected_graph(self):
        graph = Graph()
        for v in range(4):
            graph.add_vertex(v)
        graph.add_edge(0, 1)
        with pytest.raises(NoPathFoundError):
            solve_maze(graph, 2, 2)
        with pytest.raises(NoPathFoundError):
            solve_maze(graph, 2, 2, strategy=const.STRATEGY_DFS)
