"""A timed escape-the-maze game."""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from dungeonarcade.profile import PlayerProfile

WALL = "#"
OPEN = " "
EXIT = "E"
ESCAPE_REWARD = 3

_STEPS = {"w": (-1, 0), "s": (1, 0), "a": (0, -1), "d": (0, 1)}


class Maze:
    """A random grid of walls with an exit in the bottom wall.

    Cells are addressed as (row, column).
    """

    def __init__(self, rows: int, cols: int, rng: Optional[random.Random] = None) -> None:
        if rows < 3 or cols < 3:
            raise ValueError("a maze needs at least 3 rows and 3 columns")
        self.rows = rows
        self.cols = cols
        self.rng = rng if rng is not None else random.Random()
        self.grid = [[WALL] * cols for _ in range(rows)]
        self.exit = (rows - 1, cols - 2)

    def _random_cell(self) -> str:
        return OPEN if self.rng.randrange(3) != 0 else WALL

    def create(self) -> None:
        """Fill the inside at random until the exit can be reached from (1, 1)."""
        while True:
            for row in self.grid[1:-1]:
                row[1:-1] = [self._random_cell() for _ in range(self.cols - 2)]
            self.grid[1][1] = OPEN
            exit_row, exit_col = self.exit
            self.grid[exit_row][exit_col] = EXIT
            if self.has_path():
                return

    def has_path(self) -> bool:
        """Whether the exit can be reached from (1, 1) without crossing walls."""
        start = (1, 1)
        if self.is_wall(*start):
            return False
        seen = {start}
        stack = [start]
        while stack:
            cell = stack.pop()
            if cell == self.exit:
                return True
            row, col = cell
            for d_row, d_col in _STEPS.values():
                nxt = (row + d_row, col + d_col)
                if nxt not in seen and not self.is_wall(*nxt):
                    seen.add(nxt)
                    stack.append(nxt)
        return False

    def is_wall(self, x: int, y: int) -> bool:
        """Whether row x, column y is a wall; cells off the grid count as walls."""
        if not (0 <= x < self.rows and 0 <= y < self.cols):
            return True
        return self.grid[x][y] == WALL

    def is_exit(self, x: int, y: int) -> bool:
        return (x, y) == self.exit

    def render(self) -> str:
        return "\n".join("".join(row) for row in self.grid)


@dataclass
class Walker:
    """A position in the maze, moved with the w/a/s/d keys."""

    x: int
    y: int

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def target(self, direction: str) -> tuple[int, int]:
        """Where a step in this direction would lead; other keys stay put."""
        d_x, d_y = _STEPS.get(direction, (0, 0))
        return (self.x + d_x, self.y + d_y)

    def move(self, direction: str) -> None:
        self.x, self.y = self.target(direction)


class MazeGame:
    """Escape a fresh maze before the time limit runs out."""

    def __init__(
        self,
        rows: int,
        cols: int,
        time_limit: float,
        profile: Optional[PlayerProfile] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.maze = Maze(rows, cols, rng)
        self.walker = Walker(1, 1)
        self.time_limit = time_limit
        self.profile = profile if profile is not None else PlayerProfile()
        self._clock = clock
        self._started = clock()

    def remaining(self) -> int:
        """Whole seconds left on the clock."""
        return int(self.time_limit - int(self._clock() - self._started))

    def is_time_over(self) -> bool:
        return self._clock() - self._started >= self.time_limit

    @property
    def escaped(self) -> bool:
        return self.maze.is_exit(self.walker.x, self.walker.y)

    def step(self, key: str) -> bool:
        """Move the walker unless a wall is in the way; tell whether it moved."""
        target = self.walker.target(key)
        if target == self.walker.position or self.maze.is_wall(*target):
            return False
        self.walker.move(key)
        return True

    def start(self, console) -> bool:
        """Play one round; give True when the player escaped in time."""
        self.maze.create()
        self.walker = Walker(1, 1)
        self._started = self._clock()

        console.clear()
        console.write(self.maze.render() + "\n")
        console.write_at(self.walker.y, self.walker.x, "P")

        info_col = max(0, self.maze.cols // 2 - 10)
        while True:
            console.write_at(info_col, self.maze.rows + 1, f"남은시간 : {self.remaining()}초   ")

            key = console.read_key(0.03)
            if key is not None:
                old_x, old_y = self.walker.position
                if self.step(key):
                    console.write_at(old_y, old_x, " ")
                    console.write_at(self.walker.y, self.walker.x, "P")

            if self.escaped:
                console.write_at(info_col, self.maze.rows + 3, "★ 탈출 성공!! ★\n코인 3개를 드립니다!!\n")
                self.profile.earn(ESCAPE_REWARD)
                console.write(f"현재 코인: {self.profile.coins}\n")
                console.pause(3)
                return True

            if self.is_time_over():
                console.write_at(info_col, self.maze.rows + 3, "제한 시간 초과! 탈출 실패...\n")
                return False