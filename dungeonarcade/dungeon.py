"""The dungeon map: rooms in a row joined by corridors, and the monsters in them."""

from __future__ import annotations

import enum
from dataclasses import dataclass

ROOM_W = 12
ROOM_H = 9
SPACING = 4
BOSS_W = 18
BOSS_H = 11
START_X = 3

WALL = "#"
FLOOR = "."
DOOR = "+"
EMPTY = " "

_FOOTER = "W,A,S,D 이동, Q or ESC 종료\n"


@dataclass
class Tile:
    glyph: str = WALL
    walkable: bool = False


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    w: int
    h: int

    @property
    def center(self) -> tuple[int, int]:
        return (self.x + self.w // 2, self.y + self.h // 2)


class RoomKind(enum.Enum):
    START = enum.auto()
    MINI_GAME = enum.auto()
    BOSS = enum.auto()


@dataclass
class Room:
    area: Rect = Rect(0, 0, 0, 0)
    kind: RoomKind = RoomKind.START
    minigame_id: int = -1


class DungeonMap:
    """A grid of tiles holding a linear chain of rooms."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Map size must be positive")
        self.width = width
        self.height = height
        self.tiles = [Tile() for _ in range(width * height)]
        self.rooms: list[Room] = []

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the map")
        return self.tiles[y * self.width + x]

    def _fill_empty(self) -> None:
        for tile in self.tiles:
            tile.glyph = EMPTY
            tile.walkable = False

    def _set(self, x: int, y: int, glyph: str, walkable: bool) -> None:
        tile = self.at(x, y)
        tile.glyph = glyph
        tile.walkable = walkable

    def _carve_room(self, r: Rect) -> None:
        for y in range(r.y, r.y + r.h):
            for x in range(r.x, r.x + r.w):
                if not self.in_bounds(x, y):
                    continue
                edge = y in (r.y, r.y + r.h - 1) or x in (r.x, r.x + r.w - 1)
                if edge:
                    self._set(x, y, WALL, False)
                else:
                    self._set(x, y, FLOOR, True)

    def _carve_h_corridor(self, x1: int, x2: int, y: int) -> None:
        x1, x2 = sorted((x1, x2))
        for x in range(x1, x2 + 1):
            if not self.in_bounds(x, y):
                continue
            self._set(x, y, FLOOR, True)
            for side in (y - 1, y + 1):
                if self.in_bounds(x, side) and self.at(x, side).glyph == EMPTY:
                    self._set(x, side, WALL, False)

    def _place_door(self, r: Rect) -> None:
        door_x = r.x - SPACING // 2
        door_y = r.y + r.h // 2
        if self.in_bounds(door_x, door_y):
            self._set(door_x, door_y, DOOR, True)

    def generate_linear(self, mini_rooms: int = 5) -> list[Room]:
        """Lay out a start room, the mini-game rooms and a boss room left to right."""
        if mini_rooms < 0:
            raise ValueError("mini_rooms must be >= 0")
        needed_width = 2 + ROOM_W * (1 + mini_rooms) + BOSS_W + SPACING * (mini_rooms + 2)
        if self.width < needed_width or self.height < max(ROOM_H, BOSS_H) + 4:
            raise ValueError("Map is too small for the requested linear dungeon.")

        self._fill_empty()
        self.rooms = []

        start_y = self.height // 2 - ROOM_H // 2
        start = Rect(START_X, start_y, ROOM_W, ROOM_H)
        self._carve_room(start)
        self.rooms.append(Room(start, RoomKind.START, -1))
        prev_cx, prev_cy = start.center

        for i in range(mini_rooms):
            x = START_X + (ROOM_W + SPACING) * (i + 1)
            room = Rect(x, start_y, ROOM_W, ROOM_H)
            self._carve_room(room)
            self.rooms.append(Room(room, RoomKind.MINI_GAME, i + 1))
            cur_cx, cur_cy = room.center
            self._carve_h_corridor(prev_cx, cur_cx, prev_cy)
            self._place_door(room)
            prev_cx, prev_cy = cur_cx, cur_cy

        boss_x = START_X + (ROOM_W + SPACING) * (mini_rooms + 1)
        boss_y = self.height // 2 - BOSS_H // 2
        boss = Rect(boss_x, boss_y, BOSS_W, BOSS_H)
        self._carve_room(boss)
        self.rooms.append(Room(boss, RoomKind.BOSS, -1))
        boss_cx, _ = boss.center
        self._carve_h_corridor(prev_cx, boss_cx, prev_cy)
        self._place_door(boss)
        return self.rooms

    def render(self) -> str:
        """The whole map, one line per row, followed by the controls line."""
        rows = (
            "".join(tile.glyph for tile in self.tiles[y * self.width:(y + 1) * self.width]) + "\n"
            for y in range(self.height)
        )
        return "".join(rows) + _FOOTER


@dataclass
class Monster:
    """A figure in a room that starts a mini-game when the player talks to it."""

    x: int
    y: int
    room_id: int
    minigame_id: int
    symbol: str = "○"
    active: bool = True

    def is_near_player(self, px: int, py: int) -> bool:
        """Whether the player stands right next to the monster, not diagonally."""
        return abs(px - self.x) + abs(py - self.y) == 1