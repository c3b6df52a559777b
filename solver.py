# solver.py
from collections import deque
from typing import Dict, List, Set

# Import from other project modules
import constants as const
from errors import NoPathFoundError
from graph import Graph
from grid_core import RectGrid


def bfs_parent_map(
    graph: Graph, start: int = const.ORIGIN_CELL, legacy: bool = False
) -> Dict[int, int]:
    """
    Builds a came-from map with a breadth-first traversal from start.

    Standard mode records path[neighbour] = current the first time a
    neighbour is discovered.

    legacy=True keeps the older re-encounter rule: cells are marked
    seen when dequeued, and an entry path[current] = neighbour is written
    only when a neighbour has already been seen. On a tree the one seen
    neighbour is the parent, so the map is still usable. On graphs with
    cycles the last seen neighbour wins and the map is unreliable.
    """
    path: Dict[int, int] = {}
    queue = deque([start])

    if legacy:
        seen: Set[int] = set()
        while queue:
            current = queue.popleft()
            seen.add(current)
            for neighbour in graph.get_adjacent_vertices(current):
                if neighbour not in seen:
                    queue.append(neighbour)
                else:
                    path[current] = neighbour
        return path

    seen = {start}
    while queue:
        current = queue.popleft()
        for neighbour in graph.get_adjacent_vertices(current):
            if neighbour not in seen:
                seen.add(neighbour)
                path[neighbour] = current
                queue.append(neighbour)
    return path


def dfs_parent_map(graph: Graph, start: int = const.ORIGIN_CELL) -> Dict[int, int]:
    """
    Builds a came-from map with a depth-first traversal from start.

    Equivalent to the recursive form

        visit(c): if c unseen: mark c; for v in adj(c): visit(v); path[v] = c
                  else: drop path[c]

    but driven by an explicit stack of (cell, neighbours, position) frames so
    large grids do not hit the recursion limit. Visiting order, the
    post-visit assignment and the drop-on-revisit rule are all preserved.
    """
    seen: Set[int] = set()
    path: Dict[int, int] = {}
    stack: List[list] = []

    def enter(cell: int) -> bool:
        if cell in seen:
            path.pop(cell, None)
            return False
        seen.add(cell)
        stack.append([cell, graph.get_adjacent_vertices(cell), 0])
        return True

    enter(start)
    while stack:
        frame = stack[-1]
        cell, neighbours, position = frame
        if position == len(neighbours):
            stack.pop()
            if stack:
                path[cell] = stack[-1][0]
            continue

        frame[2] += 1
        neighbour = neighbours[position]
        if not enter(neighbour):
            path[neighbour] = cell

    return path


def trace_back(
    path: Dict[int, int], goal: int, origin: int = const.ORIGIN_CELL
) -> List[int]:
    """
    Follows parent pointers from goal until origin is reached.

    Returns the trail from goal to origin, both inclusive.
    """
    trail = [goal]
    visited = {goal}
    current = goal
    while current != origin:
        if current not in path:
            raise NoPathFoundError(
                f"Cell {current} has no parent entry; cannot reach {origin} from {goal}."
            )
        current = path[current]
        if current in visited:
            raise NoPathFoundError(f"Parent map loops back to cell {current}.")
        visited.add(current)
        trail.append(current)
    return trail


def solve_maze(
    graph: Graph,
    rows: int,
    cols: int,
    strategy: str = const.STRATEGY_BFS,
    legacy_bfs: bool = False,
) -> List[int]:
    """
    Finds the trail from the terminal cell (rows*cols - 1) back to the origin.

    strategy is "BFS" or "DFS". The DFS trail is a valid walk but, on general
    graphs, not necessarily the shortest one. On a perfect maze the two agree.
    """
    grid = RectGrid(rows, cols)
    if graph.vertex_size() != grid.size():
        raise ValueError(
            f"Graph has {graph.vertex_size()} vertices but the grid has {grid.size()} cells."
        )

    print(f"--- Solving Maze ({strategy}) from {grid.terminal} to {grid.origin} ---")
    if strategy == const.STRATEGY_BFS:
        path = bfs_parent_map(graph, grid.origin, legacy=legacy_bfs)
    elif strategy == const.STRATEGY_DFS:
        path = dfs_parent_map(graph, grid.origin)
    else:
        raise ValueError(
            f"Unknown strategy '{strategy}', expected one of {const.STRATEGIES}."
        )

    trail = trace_back(path, grid.terminal, grid.origin)
    print(f"  Trail length: {len(trail)} cells.")
    return trail
