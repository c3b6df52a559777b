# maze_gen.py
from typing import Optional

import numpy as np

# Import from other project modules
import constants as const
from disjoint_set import DisjointSet
from errors import MazeGenerationError
from graph import Graph
from grid_core import RectGrid
from utils import count_components, is_spanning_tree


def build_spanning_tree(
    grid: RectGrid,
    disjoint_set: DisjointSet,
    graph: Graph,
    rng: np.random.Generator,
    max_attempts: Optional[int] = const.DEFAULT_MAX_ATTEMPTS,
) -> int:
    """
    Carves passages using randomized incremental union.

    Repeatedly picks a random cell and direction. The proposal is accepted
    only if the neighbour exists and lies in a different set, so every
    accepted edge joins two trees and no cycle can form. Rejected proposals
    do not count towards the total - 1 edges required.

    Mutates both disjoint_set and graph. Returns the number of attempts made.
    """
    target_edges = grid.size() - 1
    added = 0
    attempts = 0

    while added < target_edges:
        if max_attempts is not None and attempts >= max_attempts:
            raise MazeGenerationError(
                f"Gave up after {attempts} attempts with {added}/{target_edges} passages carved."
            )
        attempts += 1

        cell = grid.random_cell(rng)
        direction = grid.random_direction(rng)
        neighbour = grid.neighbour(cell, direction)
        if neighbour is None or disjoint_set.same_set(cell, neighbour):
            continue

        disjoint_set.union(cell, neighbour)
        graph.add_edge(cell, neighbour)
        added += 1

    return attempts


def generate_maze(
    rows: int,
    cols: int,
    seed: Optional[int] = const.DEFAULT_SEED,
    rng: Optional[np.random.Generator] = None,
    max_attempts: Optional[int] = const.DEFAULT_MAX_ATTEMPTS,
) -> Graph:
    """
    Generates a perfect maze over a rows x cols grid.

    Either pass a seed (a fresh generator is created from it) or an existing
    numpy Generator. The same seed always produces an identical Graph. The
    DisjointSet only lives for the duration of this call.
    """
    grid = RectGrid(rows, cols)
    print(f"--- Starting Maze Generation ({rows}x{cols}, Randomized Union) ---")
    if rng is None:
        rng = np.random.default_rng(seed)

    disjoint_set = DisjointSet(grid.size())
    graph = Graph()
    for cell in grid.get_all_cells():
        graph.add_vertex(cell)

    attempts = build_spanning_tree(grid, disjoint_set, graph, rng, max_attempts)
    print(
        f"--- Maze Generation Complete: {graph.edge_size()} passages in {attempts} attempts. ---"
    )

    # Sanity check: the result must be a single tree over every cell
    if not is_spanning_tree(graph):
        raise MazeGenerationError(
            f"Generated graph is not a spanning tree: {graph.edge_size()} edges, "
            f"{count_components(graph)} components over {graph.vertex_size()} cells."
        )

    return graph
