# main.py
import argparse
import os
import sys
import time
import traceback
from typing import List, Optional

# Import project modules
import constants as const
from grid_core import RectGrid
from maze_gen import generate_maze
from solver import solve_maze
from visualization import visualize_maze, visualize_maze_solution


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate and solve a rectangular perfect maze.")
    parser.add_argument("--rows", type=int, default=const.DEFAULT_ROWS, help="Number of grid rows")
    parser.add_argument("--cols", type=int, default=const.DEFAULT_COLS, help="Number of grid columns")
    parser.add_argument("--seed", type=int, default=const.DEFAULT_SEED, help="Random seed for reproducible mazes")
    parser.add_argument(
        "--strategy",
        choices=[*const.STRATEGIES, "both"],
        default="both",
        help="Solver traversal to run (default: both)",
    )
    parser.add_argument(
        "--legacy-bfs",
        action="store_true",
        help="Record BFS parents on re-encounter instead of on first discovery",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=const.DEFAULT_MAX_ATTEMPTS,
        help="Abort generation after this many edge proposals",
    )
    parser.add_argument("--output-dir", default="output", help="Directory for rendered images")
    parser.add_argument("--no-plots", action="store_true", help="Skip writing images")
    return parser.parse_args(argv)


def run_maze_generation(args: argparse.Namespace) -> int:
    start_time = time.time()

    print("\n--- Configuration ---")
    print(f"  Grid: {args.rows}x{args.cols}, Seed: {args.seed}, Strategy: {args.strategy}")
    if args.legacy_bfs:
        print("  Using legacy BFS parent assignment.")

    try:
        grid = RectGrid(args.rows, args.cols)
        graph = generate_maze(args.rows, args.cols, seed=args.seed, max_attempts=args.max_attempts)
    except Exception as e:
        print(f"ERROR during maze generation: {e}")
        traceback.print_exc()
        return 1

    strategies = const.STRATEGIES if args.strategy == "both" else (args.strategy,)
    trails = {}
    for strategy in strategies:
        try:
            trails[strategy] = solve_maze(
                graph, args.rows, args.cols, strategy=strategy, legacy_bfs=args.legacy_bfs
            )
        except Exception as e:
            print(f"ERROR solving with {strategy}: {e}")
            traceback.print_exc()

    if not args.no_plots:
        print("\n--- Generating Visualizations ---")
        os.makedirs(args.output_dir, exist_ok=True)
        visualize_maze(graph, grid, filename=os.path.join(args.output_dir, "maze.png"))
        for strategy, trail in trails.items():
            visualize_maze_solution(
                graph,
                grid,
                trail,
                filename=os.path.join(args.output_dir, f"maze_solution_{strategy.lower()}.png"),
                title=f"Maze Solution ({strategy}, {len(trail)} cells)",
            )

    end_time = time.time()
    print(f"\n--- Total Execution Time: {end_time - start_time:.2f} seconds ---")
    return 0 if len(trails) == len(strategies) else 1


def main(argv: Optional[List[str]] = None) -> int:
    return run_maze_generation(parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
