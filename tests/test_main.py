"""Tests for main.py"""

from main import main, parse_args


def test_defaults():
    args = parse_args([])
    assert args.strategy == "both"
    assert not args.legacy_bfs
    assert args.max_attempts is None


def test_full_run_writes_images(tmp_path):
    exit_code = main(["--rows", "4", "--cols", "5", "--seed", "3", "--output-dir", str(tmp_path)])
    assert exit_code == 0
    assert (tmp_path / "maze.png").exists()
    assert (tmp_path / "maze_solution_bfs.png").exists()
    assert (tmp_path / "maze_solution_dfs.png").exists()


def test_single_strategy_without_plots(tmp_path, capsys):
    exit_code = main(
        ["--rows", "3", "--cols", "3", "--seed", "1", "--strategy", "DFS",
         "--no-plots", "--output-dir", str(tmp_path / "out")]
    )
    assert exit_code == 0
    assert not (tmp_path / "out").exists()
    assert "Solving Maze (DFS)" in capsys.readouterr().out


def test_invalid_size_fails(tmp_path):
    assert main(["--rows", "0", "--output-dir", str(tmp_path)]) == 1


def test_attempt_bound_fails(tmp_path):
    assert main(["--rows", "5", "--cols", "5", "--max-attempts", "3", "--no-plots"]) == 1
