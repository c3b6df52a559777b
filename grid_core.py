# grid_core.py
from typing import Iterator, List, Optional, Tuple

import numpy as np

# Import from other project modules
import constants as const
from errors import InvalidSizeError
from graph import Graph


class RectGrid:
    """
    Represents a rows x cols rectangular grid of cells.

    Cells are plain integers in row-major order: index = row * cols + col.
    The grid knows nothing about passages; it only answers which cell lies in
    which direction, and which walls a Graph leaves standing.
    """

    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise InvalidSizeError(
                f"Grid dimensions must be positive, got rows={rows}, cols={cols}."
            )
        self.rows = rows
        self.cols = cols

    def size(self) -> int:
        """Returns the total number of cells in the grid."""
        return self.rows * self.cols

    @property
    def origin(self) -> int:
        return const.ORIGIN_CELL

    @property
    def terminal(self) -> int:
        return self.size() - 1

    def index(self, row: int, col: int) -> int:
        """Converts (row, col) to a cell index."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.rows}x{self.cols} grid.")
        return row * self.cols + col

    def coords(self, index: int) -> Tuple[int, int]:
        """Converts a cell index to (row, col)."""
        return index // self.cols, index % self.cols

    def raw_neighbour(self, index: int, direction: str) -> int:
        """
        Returns the index offset one step in direction, without bounds checks.

        The result may be negative, past the last cell, or wrap onto the
        adjacent row (east/west).
        """
        if direction == const.DIR_NORTH:
            return index - self.cols
        if direction == const.DIR_SOUTH:
            return index + self.cols
        if direction == const.DIR_EAST:
            return index + 1
        if direction == const.DIR_WEST:
            return index - 1
        raise ValueError(f"Unknown direction '{direction}'.")

    def neighbour(self, index: int, direction: str) -> Optional[int]:
        """Returns the neighbouring cell in direction, or None at the grid boundary."""
        total = self.size()
        if direction == const.DIR_NORTH:
            valid = index >= self.cols
        elif direction == const.DIR_SOUTH:
            valid = index < total - self.cols
        elif direction == const.DIR_EAST:
            valid = index < total - 1 and (index + 1) % self.cols != 0
        elif direction == const.DIR_WEST:
            valid = index > 0 and index % self.cols != 0
        else:
            raise ValueError(f"Unknown direction '{direction}'.")
        return self.raw_neighbour(index, direction) if valid else None

    def random_cell(self, rng: np.random.Generator) -> int:
        """Returns a uniformly random cell index."""
        return int(rng.integers(self.size()))

    def random_direction(self, rng: np.random.Generator) -> str:
        """Returns a uniformly random direction."""
        return const.DIRECTIONS[int(rng.integers(len(const.DIRECTIONS)))]

    def get_all_cells(self) -> Iterator[int]:
        """Returns an iterator over all cell indices."""
        yield from range(self.size())

    def adjacent_pairs(self) -> Iterator[Tuple[int, int]]:
        """Yields every pair of grid-adjacent cells exactly once (east and south links)."""
        for cell in self.get_all_cells():
            for direction in (const.DIR_EAST, const.DIR_SOUTH):
                other = self.neighbour(cell, direction)
                if other is not None:
                    yield cell, other

    def wall_directions(self, graph: Graph, index: int) -> List[str]:
        """
        Directions (N, S, E, W order) in which cell index has a wall.

        Boundary sides always have a wall. The raw offset alone is not enough
        on a one-column grid, where east/west wrap onto a real south/north
        passage.
        """
        walls = []
        for direction in const.DIRECTIONS:
            other = self.neighbour(index, direction)
            if other is None or not graph.contains_edge(index, other):
                walls.append(direction)
        return walls

    def __repr__(self) -> str:
        return f"RectGrid({self.rows}x{self.cols})"
