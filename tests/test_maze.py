import io
import itertools
import random

import pytest

from dungeonarcade.console import Console
from dungeonarcade.maze import Maze, MazeGame, Walker
from dungeonarcade.profile import PlayerProfile


def quiet_console(keys=""):
    return Console(output=io.StringIO(), keys=keys, sleep=lambda seconds: None)


@pytest.mark.parametrize("seed", range(5))
def test_created_maze_has_path(seed):
    maze = Maze(20, 40, random.Random(seed))
    maze.create()
    assert maze.has_path()
    assert not maze.is_wall(1, 1)
    assert maze.is_exit(19, 38)


def test_border_stays_wall_except_exit():
    maze = Maze(10, 12, random.Random(1))
    maze.create()
    for col in range(12):
        assert maze.is_wall(0, col)
    for row in range(10):
        assert maze.is_wall(row, 0)
        assert maze.is_wall(row, 11)
    assert not maze.is_wall(*maze.exit)


def test_fresh_maze_has_no_path():
    maze = Maze(5, 5)
    assert not maze.has_path()


def test_off_grid_counts_as_wall():
    maze = Maze(4, 4)
    assert maze.is_wall(-1, 0)
    assert maze.is_wall(0, 4)


def test_render_shape():
    maze = Maze(6, 9, random.Random(3))
    maze.create()
    lines = maze.render().split("\n")
    assert len(lines) == 6
    assert all(len(line) == 9 for line in lines)


def test_too_small_maze_rejected():
    with pytest.raises(ValueError):
        Maze(2, 10)


def test_walker_moves_and_targets():
    walker = Walker(1, 1)
    assert walker.target("s") == (2, 1)
    walker.move("d")
    assert walker.position == (1, 2)
    walker.move("x")
    assert walker.position == (1, 2)


def test_step_blocked_by_wall_and_into_exit():
    game = MazeGame(3, 3, 60, clock=lambda: 0.0)
    game.maze.create()
    assert not game.step("w")
    assert game.walker.position == (1, 1)
    assert game.step("s")
    assert game.escaped


def test_start_escape_awards_coins():
    profile = PlayerProfile()
    game = MazeGame(3, 3, 60, profile=profile, clock=lambda: 0.0)
    assert game.start(quiet_console("s")) is True
    assert profile.coins == 3


def test_start_times_out():
    counter = itertools.count(0, 10)
    profile = PlayerProfile()
    game = MazeGame(3, 3, 5, profile=profile, clock=lambda: next(counter))
    assert game.start(quiet_console()) is False
    assert profile.coins == 0


def test_remaining_counts_down():
    now = [0.0]
    game = MazeGame(3, 3, 60, clock=lambda: now[0])
    now[0] = 10.5
    assert game.remaining() == 50
    assert not game.is_time_over()
    now[0] = 60.0
    assert game.is_time_over()