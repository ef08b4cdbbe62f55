"""Walk the dungeon, talk to its monsters and play their games."""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from dungeonarcade import reaction
from dungeonarcade.boss import BossBattle
from dungeonarcade.console import KEY_ESCAPE, Console
from dungeonarcade.dino import DinoRunner
from dungeonarcade.dungeon import DungeonMap, Monster, RoomKind
from dungeonarcade.jumpgame import JumpGame
from dungeonarcade.maze import MazeGame
from dungeonarcade.memory import MemoryGame
from dungeonarcade.poop import PoopGame
from dungeonarcade.profile import PlayerProfile
from dungeonarcade.shop import Shop

MAP_WIDTH = 120
MAP_HEIGHT = 30
MINI_ROOMS = 5
BOSS_ID = 999

TUTORIAL_ROWS = 20
TUTORIAL_COLS = 40
TUTORIAL_SECONDS = 60

_STEPS = {"w": (0, -1), "s": (0, 1), "a": (-1, 0), "d": (1, 0)}
_QUIT_KEYS = {KEY_ESCAPE, "q", "Q"}

_TITLES = {
    2: "재민이의 똥피하기 게임",
    3: "재민왕자의 공룡 달리기 게임",
    4: "미진공주 구하기 기억력 게임",
    5: "재왕의 점프 게임",
    6: "상점",
    BOSS_ID: "보스전",
}


def minigame_title(minigame_id: int) -> str:
    """The name shown before the mini-game with this id starts."""
    try:
        return _TITLES[minigame_id]
    except KeyError:
        raise ValueError(f"unknown mini-game {minigame_id}") from None


def start_minigame(monster: Monster, console, profile: PlayerProfile):
    """Run the game a monster guards and give back what that game returns."""
    game_id = monster.minigame_id
    minigame_title(game_id)
    if game_id == 2:
        return PoopGame(profile=profile).run(console, profile)
    if game_id == 3:
        return DinoRunner().run(console, profile)
    if game_id == 4:
        return MemoryGame(profile=profile).run(console)
    if game_id == 5:
        console.write(" 점프게임 시작전 손풀기용 게임입니다. 준비되셨으면 엔터키를 눌러주세요!")
        console.clear()
        console.read_line()
        reaction.run(console)
        console.clear()
        return JumpGame(profile).start(console)
    if game_id == 6:
        return Shop(profile).enter(console)
    return BossBattle(profile).start(console)


class Explorer:
    """The player's walk through a dungeon full of monsters."""

    def __init__(
        self,
        dungeon: Optional[DungeonMap] = None,
        profile: Optional[PlayerProfile] = None,
    ) -> None:
        self.dungeon = dungeon if dungeon is not None else DungeonMap(MAP_WIDTH, MAP_HEIGHT)
        if not self.dungeon.rooms:
            self.dungeon.generate_linear(MINI_ROOMS)
        self.profile = profile if profile is not None else PlayerProfile()
        self.px, self.py = self.dungeon.rooms[0].area.center
        self.monsters: list[Monster] = self.place_monsters()

    def place_monsters(self) -> list[Monster]:
        """Put a monster in the middle of every game room and block each room's centre."""
        monsters = []
        for index, room in enumerate(self.dungeon.rooms):
            cx, cy = room.area.center
            if room.kind is RoomKind.MINI_GAME:
                monsters.append(Monster(cx, cy, index, index + 1, "●"))
            elif room.kind is RoomKind.BOSS:
                monsters.append(Monster(cx, cy, index, BOSS_ID, "★"))
            self.dungeon.at(cx, cy).walkable = False
        self.monsters = monsters
        return monsters

    def move(self, key: Optional[str]) -> bool:
        """Step with w/a/s/d onto a walkable tile; tell whether the player moved."""
        if key not in _STEPS:
            return False
        dx, dy = _STEPS[key]
        nx, ny = self.px + dx, self.py + dy
        if not self.dungeon.in_bounds(nx, ny) or not self.dungeon.at(nx, ny).walkable:
            return False
        self.px, self.py = nx, ny
        return True

    def nearby_monsters(self) -> list[Monster]:
        """Active monsters right next to the player."""
        return [m for m in self.monsters if m.active and m.is_near_player(self.px, self.py)]

    def render(self) -> str:
        """The map with the active monsters and the player drawn on it."""
        d = self.dungeon
        grid = [
            [d.at(x, y).glyph for x in range(d.width)]
            for y in range(d.height)
        ]
        for monster in self.monsters:
            if monster.active and d.in_bounds(monster.x, monster.y):
                grid[monster.y][monster.x] = monster.symbol
        if d.in_bounds(self.px, self.py):
            grid[self.py][self.px] = "@"
        lines = "".join("".join(row) + "\n" for row in grid)
        return lines + "W,A,S,D 이동, Q or ESC 종료\n"


def _interact(explorer: Explorer, monster: Monster, console, profile: PlayerProfile) -> None:
    if not monster.active:
        return
    console.write_at(0, explorer.dungeon.height, f"{minigame_title(monster.minigame_id)} ~~~ 미니게임 시작!\n")
    console.pause(1)
    start_minigame(monster, console, profile)
    monster.active = False
    if explorer.dungeon.in_bounds(monster.x, monster.y):
        explorer.dungeon.at(monster.x, monster.y).walkable = True
    console.clear()
    console.write_at(0, 0, explorer.render())


def run_dungeon(console, profile: Optional[PlayerProfile] = None) -> Explorer:
    """Explore until the player quits; give the explorer as it ended."""
    profile = profile if profile is not None else PlayerProfile()
    explorer = Explorer(profile=profile)
    console.clear()
    console.write_at(0, 0, explorer.render())

    while True:
        key = console.read_key(None)
        if key in _QUIT_KEYS:
            return explorer
        if key == " ":
            for monster in explorer.nearby_monsters():
                _interact(explorer, monster, console, profile)
        if explorer.move(key):
            console.write_at(0, 0, explorer.render())


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="dungeonarcade", description="A dungeon of terminal mini-games.")
    parser.add_argument("--skip-tutorial", action="store_true", help="go straight to the dungeon")
    args = parser.parse_args(argv)

    console = Console()
    profile = PlayerProfile()
    if not args.skip_tutorial:
        console.write("듀토리얼에 오신것을 환영합니다!\n")
        console.pause(3)
        MazeGame(TUTORIAL_ROWS, TUTORIAL_COLS, TUTORIAL_SECONDS, profile=profile).start(console)
    try:
        run_dungeon(console, profile)
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0