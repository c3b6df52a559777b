# visualization.py
import matplotlib.pyplot as plt
import numpy as np
from abc import ABC, abstractmethod
from matplotlib.patches import Rectangle
from typing import Optional, Sequence, Tuple

# Import from other project modules
import constants as const
from graph import Graph
from grid_core import RectGrid


class Renderer(ABC):
    """
    Receives paint commands from the maze engine.

    The engine decides which walls and cells to paint; a renderer only knows
    how to turn a cell index and direction into something visible.
    """

    @abstractmethod
    def draw_grid_background(self):
        ...

    @abstractmethod
    def draw_wall(self, cell_index: int, direction: str):
        ...

    @abstractmethod
    def fill_cell(self, cell_index: int):
        ...


# --- Painting (engine side) ---
def draw_maze(graph: Graph, grid: RectGrid, renderer: Renderer) -> int:
    """Paints the background, then every wall left standing by the graph. Returns the wall count."""
    renderer.draw_grid_background()
    wall_count = 0
    for cell in grid.get_all_cells():
        for direction in grid.wall_directions(graph, cell):
            renderer.draw_wall(cell, direction)
            wall_count += 1
    return wall_count


def draw_solution(trail: Sequence[int], renderer: Renderer):
    """Fills every cell of the solution trail, in trail order."""
    for cell in trail:
        renderer.fill_cell(cell)


# --- Matplotlib Renderer ---
class MatplotlibRenderer(Renderer):
    """Draws a rectangular maze onto a matplotlib figure. Row 0 is the top row."""

    def __init__(self, grid: RectGrid, cell_size: float = const.VIS_CELL_SIZE):
        self.grid = grid
        self.cell_size = cell_size
        self.fig, self.ax = plt.subplots(
            figsize=(
                max(2.0, grid.cols * const.VIS_FIGURE_SCALE),
                max(2.0, grid.rows * const.VIS_FIGURE_SCALE),
            )
        )
        self.ax.set_xlim(0, grid.cols * cell_size)
        self.ax.set_ylim(0, grid.rows * cell_size)
        self.ax.set_aspect("equal")
        self.ax.set_axis_off()

    def _cell_corner(self, cell_index: int) -> Tuple[float, float]:
        """Lower-left corner of a cell in plot coordinates."""
        row, col = self.grid.coords(cell_index)
        return col * self.cell_size, (self.grid.rows - 1 - row) * self.cell_size

    def _cell_center(self, cell_index: int) -> Tuple[float, float]:
        x, y = self._cell_corner(cell_index)
        return x + self.cell_size / 2.0, y + self.cell_size / 2.0

    def draw_grid_background(self):
        width = self.grid.cols * self.cell_size
        height = self.grid.rows * self.cell_size
        self.ax.add_patch(
            Rectangle((0, 0), width, height, color=const.VIS_BACKGROUND_COLOR, zorder=0)
        )
        xs = np.arange(self.grid.cols + 1) * self.cell_size
        ys = np.arange(self.grid.rows + 1) * self.cell_size
        self.ax.vlines(xs, 0, height, colors=const.VIS_CELL_OUTLINE_COLOR,
                       linewidth=const.VIS_CELL_OUTLINE_LW, zorder=1)
        self.ax.hlines(ys, 0, width, colors=const.VIS_CELL_OUTLINE_COLOR,
                       linewidth=const.VIS_CELL_OUTLINE_LW, zorder=1)

    def draw_wall(self, cell_index: int, direction: str):
        x, y = self._cell_corner(cell_index)
        s = self.cell_size
        segments = {
            const.DIR_NORTH: ((x, x + s), (y + s, y + s)),
            const.DIR_SOUTH: ((x, x + s), (y, y)),
            const.DIR_EAST: ((x + s, x + s), (y, y + s)),
            const.DIR_WEST: ((x, x), (y, y + s)),
        }
        if direction not in segments:
            raise ValueError(f"Unknown direction '{direction}'.")
        xs, ys = segments[direction]
        self.ax.plot(xs, ys, color=const.VIS_WALL_COLOR,
                     lw=const.VIS_WALL_LINE_LW, solid_capstyle="projecting", zorder=3)

    def fill_cell(self, cell_index: int):
        x, y = self._cell_corner(cell_index)
        self.ax.add_patch(
            Rectangle((x, y), self.cell_size, self.cell_size,
                      color=const.VIS_TRAIL_COLOR, alpha=const.VIS_TRAIL_ALPHA, zorder=2)
        )

    def mark_endpoints(self):
        """Marks the origin and terminal cells."""
        ox, oy = self._cell_center(self.grid.origin)
        tx, ty = self._cell_center(self.grid.terminal)
        self.ax.plot(ox, oy, const.VIS_ORIGIN_MARKER, markersize=const.VIS_MARKER_SIZE,
                     label="Origin", zorder=4)
        self.ax.plot(tx, ty, const.VIS_TERMINAL_MARKER, markersize=const.VIS_MARKER_SIZE,
                     label="Terminal", zorder=4)

    def save(self, filename: str, title: Optional[str] = None):
        """Writes the figure to filename and releases it."""
        if title:
            self.ax.set_title(title)
        self.fig.savefig(filename, dpi=const.VIS_DPI, bbox_inches="tight")
        self.close()

    def close(self):
        plt.close(self.fig)


# --- Main Visualization Functions ---

def visualize_maze(graph: Graph, grid: RectGrid, filename="maze.png"):
    """Renders the maze walls to an image file."""
    print(f"--- Generating Maze Visualization: {filename} ---")
    try:
        renderer = MatplotlibRenderer(grid)
        wall_count = draw_maze(graph, grid, renderer)
        renderer.mark_endpoints()
        renderer.save(filename, title=f"Maze {grid.rows}x{grid.cols} ({graph.edge_size()} Passages)")
        print(f"  Drew {wall_count} wall segments. Saved to {filename}")
    except Exception as e:
        print(f"ERROR during visualization: {e}")


def visualize_maze_solution(
    graph: Graph,
    grid: RectGrid,
    trail: Sequence[int],
    filename="maze_solution.png",
    title: str = "Maze Solution",
):
    """Renders the maze with the solution trail filled in."""
    print(f"--- Generating Maze Solution Visualization: {filename} ---")
    if not trail:
        print("  Empty trail, cannot visualize solution.")
        return

    try:
        renderer = MatplotlibRenderer(grid)
        draw_maze(graph, grid, renderer)
        print(f"  Filling solution trail ({len(trail)} cells)...")
        draw_solution(trail, renderer)
        renderer.mark_endpoints()
        renderer.save(filename, title=title)
        print(f"  Solution visualization saved to {filename}")
    except Exception as e:
        print(f"ERROR during visualization: {e}")
