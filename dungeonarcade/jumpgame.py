"""A platform game over five small levels."""

from __future__ import annotations

from typing import Optional

from dungeonarcade.profile import PlayerProfile

WIDTH = 30
HEIGHT = 10
MAX_JUMP = 3
START_HEARTS = 3
RESTARTS = 3
WIN_REWARD = 10

WALL = "#"
SPRING = "X"
EXIT = "E"
HEART = "H"
DOUBLE_JUMP = "J"
COIN = "C"
EMPTY = " "

_RAW_LEVELS = (
    (
        "##############################",
        "#                            #",
        "#     C             E        #",
        "#     C    X       ###       #",
        "#     C          X  C        #",
        "#             ####           #",
        "#         ##                 #",
        "#      X                     #",
        "#                        J   #",
        "##############################",
    ),
    (
        "##############################",
        "#    H   X      C   X        #",
        "#   ###        ##    E       #",
        "# X           X    ###       #",
        "#  X                        X#",
        "#    X        ####           #",
        "#       ####   X             #",
        "#   X                        #",
        "#                            #",
        "##############################",
    ),
    (
        "##############################",
        "# X C           X       E X #",
        "#   ###   ###   ###   ###   #",
        "#   X   X   X       X   X   #",
        "# #### #### #### #### ####  #",
        "#      X     X     X     X  #",
        "#   ###   ###   ###   ###   #",
        "# X                        X#",
        "#                           #",
        "##############################",
    ),
    (
        "##############################",
        "#   C X       X       X J   #",
        "#  ### ### ### ### ### ###  #",
        "# X   X   X  X    X   X   X #",
        "#   ######     ######       #",
        "#X   H    X X       X X     #",
        "#   ###     ###     ###     #",
        "# X      X       X       X  #",
        "#        X         X      E #",
        "#############################",
    ),
    (
        "##############################",
        "#                         E  #",
        "#                          X #",
        "#                        X   #",
        "#                      X     #",
        "#                  XX        #",
        "#               XX           #",
        "#            XX              #",
        "#         XX               C #",
        "##############################",
    ),
)

LEVELS = tuple(tuple(row[:WIDTH].ljust(WIDTH) for row in level) for level in _RAW_LEVELS)
MAX_LEVEL = len(LEVELS)

_CHARACTERS = {"1": ("@", 0), "2": ("&", 5), "3": ("#", 1)}


class JumpGame:
    """Jump between platforms, bounce on springs and reach the exit."""

    def __init__(self, profile: Optional[PlayerProfile] = None) -> None:
        self.profile = profile if profile is not None else PlayerProfile()
        self.player_char = "@"
        self.heart = START_HEARTS
        self.reset_count = RESTARTS
        self.current_level = 0
        self.game_win = False
        self.restart_level = False
        self.double_jump_available = False
        self.grid: list[list[str]] = []
        self.player_x = 1
        self.player_y = HEIGHT - 2
        self.jumping = False
        self.jump_height = 0
        self.load_level(0)

    def _cell(self, x: int, y: int) -> str:
        if 0 <= y < len(self.grid) and 0 <= x < WIDTH:
            return self.grid[y][x]
        return WALL

    def _clear(self, x: int, y: int) -> None:
        self.grid[y][x] = EMPTY

    def load_level(self, level: int) -> None:
        """Copy a level's map and put the player at its start."""
        if not 0 <= level < MAX_LEVEL:
            raise ValueError(f"level must be between 0 and {MAX_LEVEL - 1}")
        self.grid = [list(row) for row in LEVELS[level]]
        self.player_x = 1
        self.player_y = HEIGHT - 2
        self.jumping = False
        self.jump_height = 0

    def is_on_ground(self) -> bool:
        return self._cell(self.player_x, self.player_y + 1) == WALL

    def move_left(self) -> None:
        if self._cell(self.player_x - 1, self.player_y) != WALL:
            self.player_x -= 1

    def move_right(self) -> None:
        if self._cell(self.player_x + 1, self.player_y) != WALL:
            self.player_x += 1

    def start_jump(self) -> bool:
        """Begin a jump when standing on ground; tell whether it began."""
        if self.jumping or not self.is_on_ground():
            return False
        self.jumping = True
        self.jump_height = MAX_JUMP
        return True

    def request_restart(self) -> bool:
        """Ask for the level to restart, using up one of the restarts."""
        if self.reset_count <= 0:
            return False
        self.restart_level = True
        self.reset_count -= 1
        return True

    def jump(self) -> None:
        """Rise one row while a jump lasts and nothing blocks the head."""
        if not self.jumping:
            return
        if self.jump_height > 0 and self._cell(self.player_x, self.player_y - 1) != WALL:
            self.player_y -= 1
            self.jump_height -= 1
        else:
            self.jumping = False

    def update(self) -> None:
        """Advance one frame: jumping, springs, gravity and pickups."""
        self.jump()

        x = self.player_x
        if self._cell(x, self.player_y + 1) == SPRING:
            self._clear(x, self.player_y + 1)
            self.jumping = True
            self.jump_height = MAX_JUMP
        elif self._cell(x, self.player_y) == SPRING:
            self.heart -= 1
            self._clear(x, self.player_y)
        if not self.jumping and not self.is_on_ground():
            self.player_y += 1

        if self._cell(self.player_x, self.player_y) == EXIT:
            self.current_level += 1
            if self.current_level >= MAX_LEVEL:
                self.game_win = True
            else:
                self.load_level(self.current_level)
        here = self._cell(self.player_x, self.player_y)
        if here == HEART:
            self.heart += 1
            self._clear(self.player_x, self.player_y)
        elif here == DOUBLE_JUMP:
            self.double_jump_available = True
            self._clear(self.player_x, self.player_y)
        elif here == COIN:
            self.profile.earn(1)
            self._clear(self.player_x, self.player_y)

    def choose_character(self, choice: str) -> bool:
        """Pick a character by menu key; give False if it is unknown or too dear."""
        if choice not in _CHARACTERS:
            return False
        char, price = _CHARACTERS[choice]
        if self.profile.coins < price:
            return False
        self.profile.spend(price)
        self.player_char = char
        if choice == "3":
            self.heart = 4
        return True

    def finish(self) -> str:
        """Pay out for a win and give the closing message."""
        if self.game_win:
            self.profile.earn(WIN_REWARD)
            return "모든 레벨 클리어!\n추가코인 10개 증정!!\n"
        return "게임 오버!\n"

    def render(self) -> str:
        rows = []
        for y, row in enumerate(self.grid):
            cells = list(row)
            if y == self.player_y and 0 <= self.player_x < WIDTH:
                cells[self.player_x] = self.player_char
            rows.append("".join(cells) + "\n")
        return "".join(rows) + (
            f"체력: {self.heart}   레벨: {self.current_level + 1}/{MAX_LEVEL}\n"
            f"현재 코인: {self.profile.coins}        다시하기 가능 기회: {self.reset_count}\n"
            "게임 중 R을 눌러 재시작 가능\n"
        )

    def _new_round(self) -> None:
        self.current_level = 0
        self.heart = START_HEARTS
        self.reset_count = RESTARTS
        self.game_win = False
        self.restart_level = False

    def _handle_key(self, key: Optional[str]) -> None:
        if key is None:
            return
        key = key.lower() if len(key) == 1 else key
        if key == "a":
            self.move_left()
        elif key == "d":
            self.move_right()
        elif key == " ":
            self.start_jump()
        elif key == "r":
            self.request_restart()

    def start(self, console) -> bool:
        """Play rounds until the player declines another; give whether the last was won."""
        while True:
            self._new_round()
            console.clear()
            console.write(
                "==============================\n"
                "        Game Start!\n"
                "  아무 키나 누르면 시작합니다.\n"
                "==============================\n"
            )
            console.read_key(None)

            console.clear()
            console.write(
                "캐릭터를 선택하세요:\n"
                f"현재코인: {self.profile.coins}\n"
                "1. @ 능력없음\n2. & 벽점프 가능 (5코인)\n3. # 기본체력 4칸 (1코인)\n"
            )
            while not self.choose_character(console.read_key(None) or ""):
                pass
            self.load_level(self.current_level)
            console.clear()

            while True:
                console.write_at(0, 0, self.render())
                self._handle_key(console.read_key(0.05))
                self.update()
                if self.heart <= 0 or self.game_win:
                    break
                if self.restart_level:
                    self.load_level(self.current_level)
                    self.restart_level = False

            console.clear()
            console.write(self.finish())
            console.pause(3)
            console.write("\nR을 눌러 다시 시작, 아무 키나 누르면 종료합니다.\n")
            if console.read_key(None) not in ("r", "R"):
                return self.game_win