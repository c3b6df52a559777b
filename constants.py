# --- Grid Structure ---
DEFAULT_ROWS = 20
DEFAULT_COLS = 30
ORIGIN_CELL = 0  # Solving always starts from the top-left cell

# --- Maze Generation ---
DEFAULT_MAX_ATTEMPTS = None  # None = keep proposing edges until the tree is complete
DEFAULT_SEED = None

# --- Cell Directions ---
DIR_NORTH = "N"
DIR_SOUTH = "S"
DIR_EAST = "E"
DIR_WEST = "W"
# Order matters: the generator draws an index 0-3 into this tuple
DIRECTIONS = (DIR_NORTH, DIR_SOUTH, DIR_EAST, DIR_WEST)

# --- Solver Strategies ---
STRATEGY_BFS = "BFS"
STRATEGY_DFS = "DFS"
STRATEGIES = (STRATEGY_BFS, STRATEGY_DFS)

# --- Visualization ---
VIS_CELL_SIZE = 1.0
VIS_FIGURE_SCALE = 0.3  # Inches per cell
VIS_DPI = 150
VIS_BACKGROUND_COLOR = "white"
VIS_CELL_OUTLINE_COLOR = "lightgrey"
VIS_CELL_OUTLINE_LW = 0.5
VIS_WALL_COLOR = "black"
VIS_WALL_LINE_LW = 2.0
VIS_TRAIL_COLOR = (66 / 255, 33 / 255, 99 / 255)
VIS_TRAIL_ALPHA = 0.9
VIS_ORIGIN_MARKER = "go"
VIS_TERMINAL_MARKER = "ro"
VIS_MARKER_SIZE = 6
