from collections import deque

import pytest

from dungeonarcade.dungeon import DungeonMap, Monster, Rect, Room, RoomKind, Tile


@pytest.fixture
def dungeon():
    d = DungeonMap(120, 30)
    d.generate_linear(5)
    return d


def test_new_map_is_all_walls():
    d = DungeonMap(4, 3)
    assert all(tile == Tile("#", False) for tile in d.tiles)
    assert len(d.tiles) == 12


def test_invalid_size():
    with pytest.raises(ValueError):
        DungeonMap(0, 5)
    with pytest.raises(ValueError):
        DungeonMap(5, -1)


def test_in_bounds():
    d = DungeonMap(5, 4)
    assert d.in_bounds(0, 0)
    assert d.in_bounds(4, 3)
    assert not d.in_bounds(5, 0)
    assert not d.in_bounds(0, 4)
    assert not d.in_bounds(-1, 2)


def test_at_outside_raises():
    d = DungeonMap(5, 4)
    with pytest.raises(IndexError):
        d.at(5, 0)


def test_at_returns_shared_tile():
    d = DungeonMap(5, 4)
    d.at(2, 1).glyph = "+"
    assert d.at(2, 1).glyph == "+"
    assert d.at(1, 2).glyph == "#"


def test_room_default():
    room = Room()
    assert room.area == Rect(0, 0, 0, 0)
    assert room.kind is RoomKind.START
    assert room.minigame_id == -1


def test_room_layout(dungeon):
    rooms = dungeon.rooms
    assert len(rooms) == 7
    assert rooms[0].kind is RoomKind.START
    assert rooms[-1].kind is RoomKind.BOSS
    assert [r.minigame_id for r in rooms[1:-1]] == [1, 2, 3, 4, 5]
    assert all(r.kind is RoomKind.MINI_GAME for r in rooms[1:-1])
    assert rooms[0].area == Rect(3, 11, 12, 9)


def test_room_centers_share_a_row(dungeon):
    rows = {room.area.center[1] for room in dungeon.rooms}
    assert len(rows) == 1


def test_rooms_have_walls_and_floor(dungeon):
    for room in dungeon.rooms:
        r = room.area
        assert dungeon.at(r.x, r.y).glyph == "#"
        assert dungeon.at(r.x + r.w - 1, r.y + r.h - 1).glyph == "#"
        cx, cy = r.center
        assert dungeon.at(cx, cy).glyph == "."
        assert dungeon.at(cx, cy).walkable


def test_doors_before_each_later_room(dungeon):
    for room in dungeon.rooms[1:]:
        r = room.area
        door = dungeon.at(r.x - 2, r.y + r.h // 2)
        assert door.glyph == "+"
        assert door.walkable


def test_walkable_matches_glyph(dungeon):
    for tile in dungeon.tiles:
        assert tile.glyph in {" ", "#", ".", "+"}
        assert tile.walkable == (tile.glyph in {".", "+"})


def test_start_reaches_boss(dungeon):
    start = dungeon.rooms[0].area.center
    goal = dungeon.rooms[-1].area.center
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if (nx, ny) not in seen and dungeon.in_bounds(nx, ny) and dungeon.at(nx, ny).walkable:
                seen.add((nx, ny))
                queue.append((nx, ny))
    assert goal in seen


def test_no_mini_rooms():
    d = DungeonMap(60, 20)
    rooms = d.generate_linear(0)
    assert [r.kind for r in rooms] == [RoomKind.START, RoomKind.BOSS]


def test_too_small():
    with pytest.raises(ValueError):
        DungeonMap(100, 30).generate_linear(5)
    with pytest.raises(ValueError):
        DungeonMap(120, 10).generate_linear(5)


def test_negative_rooms():
    with pytest.raises(ValueError):
        DungeonMap(120, 30).generate_linear(-1)


def test_render_shape(dungeon):
    lines = dungeon.render().splitlines()
    assert len(lines) == dungeon.height + 1
    assert all(len(line) == dungeon.width for line in lines[:-1])
    assert lines[-1] == "W,A,S,D 이동, Q or ESC 종료"


def test_monster_adjacency():
    monster = Monster(5, 5, 1, 2)
    assert monster.symbol == "○"
    assert monster.active
    assert monster.is_near_player(4, 5)
    assert monster.is_near_player(5, 6)
    assert not monster.is_near_player(5, 5)
    assert not monster.is_near_player(6, 6)
    assert not monster.is_near_player(7, 5)