"""Side-scrolling runner: jump over cacti and duck under birds."""

from __future__ import annotations

import dataclasses
import enum
import math
import random
from dataclasses import dataclass, field
from typing import Optional

from dungeonarcade.console import KEY_DOWN, KEY_ESCAPE, KEY_UP
from dungeonarcade.profile import PlayerProfile

_TITLE = (
    "         ====================================================\n"
    "         ★★★★★★★  D I N O   R U N N E R ★★★★★★★\n"
    "         ====================================================\n\n"
)

_HELP = (
    "\n\n[조작법]\n"
    " - 점프: Space 또는 ↑ (선인장 넘기)\n"
    " - 웅크리기(홀드): S 또는 ↓ (새 피하기)\n"
    " - 일시정지: P\n"
    " - 종료: Q\n\n"
    "[룰]\n"
    " - ★ 코인: 점수 400마다 1코인 획득.\n\n"
    "아무 키나 누르면 메뉴로 돌아갑니다..."
)

_JUMP_KEYS = {" ", KEY_UP}
_DUCK_KEYS = {"s", KEY_DOWN}


def _round(value: float) -> int:
    """Round halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class DinoConfig:
    width: int = 70
    height: int = 26
    ground_y: int = 22
    base_delay: int = 18
    base_speed: float = 1.1
    gravity: float = 0.9
    jump_v: float = -4.5
    player_x: int = 10
    cactus_spawn_prob: float = 0.10
    bird_spawn_prob: float = 0.06
    bird_width: int = 3
    min_gap_tiles: int = 22
    max_gap_tiles: int = 34
    cactus_height: int = 2
    score_per_coin: int = 400


class ObstacleKind(enum.Enum):
    CACTUS_LOW = enum.auto()
    BIRD_HIGH = enum.auto()


@dataclass
class Obstacle:
    kind: ObstacleKind
    x: float
    height: int


@dataclass
class DinoState:
    y: float = 0.0
    vy: float = 0.0
    on_ground: bool = True
    duck: bool = False
    obstacles: list[Obstacle] = field(default_factory=list)
    score: int = 0
    best_score: int = 0
    coins: int = 0
    running: bool = True
    paused: bool = False
    gap_remain: float = 0.0


class DinoRunner:
    """Game logic and screen for one runner session."""

    def __init__(self, config: Optional[DinoConfig] = None, rng: Optional[random.Random] = None) -> None:
        config = config if config is not None else DinoConfig()
        ground = max(config.ground_y, 2)
        ground = min(ground, config.height - 2)
        self.config = dataclasses.replace(config, ground_y=ground)
        self.rng = rng if rng is not None else random.Random()
        self.state = DinoState()
        self.reset()

    def reset(self) -> None:
        """Start a new round, keeping the best score."""
        best = self.state.best_score
        self.state = DinoState(y=float(self.config.ground_y), best_score=best)

    def jump(self) -> None:
        st = self.state
        if st.on_ground:
            st.on_ground = False
            st.vy = self.config.jump_v
            st.duck = False

    def set_duck(self, held: bool) -> None:
        self.state.duck = self.state.on_ground and held

    def toggle_pause(self) -> None:
        self.state.paused = not self.state.paused

    def quit(self) -> None:
        self.state.running = False

    def _new_gap(self) -> float:
        cfg = self.config
        return float(cfg.min_gap_tiles + self.rng.randrange(cfg.max_gap_tiles - cfg.min_gap_tiles + 1))

    def _try_spawn(self, kind: ObstacleKind) -> Optional[Obstacle]:
        cfg = self.config
        if kind is ObstacleKind.CACTUS_LOW:
            chance = cfg.cactus_spawn_prob
            obstacle = Obstacle(kind, float(cfg.width - 2), cfg.cactus_height)
        else:
            chance = cfg.bird_spawn_prob
            obstacle = Obstacle(kind, float(cfg.width), 1)
        if self.rng.random() >= chance:
            return None
        self.state.obstacles.append(obstacle)
        self.state.gap_remain = self._new_gap()
        return obstacle

    def spawn_obstacle(self) -> Optional[Obstacle]:
        """Maybe add one cactus or bird, respecting the gap; give what was added."""
        if self.state.gap_remain > 0.0:
            return None
        if self.rng.randrange(2) == 0:
            order = (ObstacleKind.BIRD_HIGH, ObstacleKind.CACTUS_LOW)
        else:
            order = (ObstacleKind.CACTUS_LOW, ObstacleKind.BIRD_HIGH)
        for kind in order:
            spawned = self._try_spawn(kind)
            if spawned is not None:
                return spawned
        return None

    def tick(self) -> None:
        """Advance the world by one frame."""
        cfg = self.config
        st = self.state
        speed = cfg.base_speed

        self.spawn_obstacle()

        st.vy += cfg.gravity
        st.y += st.vy
        if st.y >= cfg.ground_y:
            st.y = float(cfg.ground_y)
            st.vy = 0.0
            st.on_ground = True
        else:
            st.on_ground = False
        if not st.on_ground:
            st.duck = False

        for obstacle in st.obstacles:
            obstacle.x -= speed
        st.obstacles = [o for o in st.obstacles if o.x >= -4.0]

        if st.gap_remain > 0.0:
            st.gap_remain = max(0.0, st.gap_remain - speed)

        if self.collides():
            st.running = False

        st.score += 1
        st.coins = max(st.coins, st.score // cfg.score_per_coin)

    def collides(self) -> bool:
        """Whether the player currently touches an obstacle."""
        cfg = self.config
        st = self.state
        px = cfg.player_x
        foot = _round(st.y)
        head = foot if st.duck else foot - 1
        for obstacle in st.obstacles:
            ox = _round(obstacle.x)
            if obstacle.kind is ObstacleKind.CACTUS_LOW:
                top = cfg.ground_y - (obstacle.height - 1)
                x_hit = px - 1 <= ox <= px + 1
                y_hit = not (foot < top or head > cfg.ground_y)
                if x_hit and y_hit:
                    return True
            else:
                bird_y = cfg.ground_y - 1
                y_hit = head == bird_y or foot == bird_y
                x_hit = px - 2 <= ox <= px + 2
                if x_hit and y_hit and not st.duck:
                    return True
        return False

    def render(self) -> str:
        cfg = self.config
        st = self.state
        w, h = cfg.width, cfg.height
        grid = [[" "] * w for _ in range(h)]

        def put(x: int, y: int, ch: str) -> None:
            if 0 <= x < w and 0 <= y < h:
                grid[y][x] = ch

        if 0 <= cfg.ground_y < h:
            grid[cfg.ground_y] = ["_"] * w

        for obstacle in st.obstacles:
            ox = _round(obstacle.x)
            if obstacle.kind is ObstacleKind.CACTUS_LOW:
                for k in range(obstacle.height):
                    put(ox, cfg.ground_y - k, "|")
                if obstacle.height >= 2:
                    put(ox - 1, cfg.ground_y - 1, "-")
                if obstacle.height >= 3:
                    put(ox + 1, cfg.ground_y - 2, "-")
            else:
                y = cfg.ground_y - 1
                put(ox - 1, y, "<")
                put(ox, y, "^")
                put(ox + 1, y, ">")

        px = cfg.player_x
        foot = _round(st.y)
        if st.duck:
            put(px - 1, foot, "[")
            put(px, foot, "d")
            put(px + 1, foot, "]")
        else:
            put(px, foot - 1, "O")
            put(px, foot, "#")
            put(px - 1, foot, "/")
            put(px + 1, foot, "\\")

        border = "+" + "-" * w + "+\n"
        parts = [
            f"[DINO RUNNER]  점수: {st.score}   코인: {st.coins}   최고점: {st.best_score}\n",
            "  (Space/↑ 점프: 선인장, S/↓ 숙이기: 새 회피, P 일시정지, Q 종료)\n",
            border,
            *("|" + "".join(row) + "|\n" for row in grid),
            border,
            "\n",
        ]
        if st.paused:
            parts.append("=== 일시정지 (P: 해제) ===\n\n")
        return "".join(parts)

    def handle_key(self, key: Optional[str]) -> None:
        """React to one frame's key; None means no key this frame."""
        if key is not None and len(key) == 1:
            key = key.lower()
        if key in _JUMP_KEYS:
            self.jump()
        elif key == "p":
            self.toggle_pause()
        elif key == "q":
            self.quit()
        self.set_duck(key in _DUCK_KEYS)

    def play(self, console, profile: Optional[PlayerProfile] = None) -> int:
        """Play one round until a crash or quit; give the coins earned."""
        profile = profile if profile is not None else PlayerProfile()
        self.reset()
        frame = max(1, self.config.base_delay) / 1000.0
        console.clear()
        while self.state.running:
            self.handle_key(console.read_key(frame))
            if not self.state.paused:
                self.tick()
            console.write_at(0, 0, self.render())

        st = self.state
        st.best_score = max(st.best_score, st.score)
        profile.earn(st.coins)

        console.write_at(0, 0, "")
        console.write(
            "\n\n=======================================================\n"
            " ★★★★★★★★   G A M E  O V E R   ★★★★★★★★\n"
            "=======================================================\n\n"
            f"   점수: {st.score}   코인: {st.coins}   최고점수: {st.best_score}\n\n"
            "   (코인은 이번 판 기준: 400점 당 1개)\n\n"
        )
        console.pause(3)
        return st.coins

    def _pick(self, console) -> int:
        console.clear()
        console.write(_TITLE)
        console.write(" \t\t\t 1) 시작\n \t\t\t 2) 조작법 보기\n \t\t\t 3) 종료\n\n번호를 선택하세요: ")
        while True:
            key = console.read_key(None)
            if key == "1":
                return 1
            if key == "2":
                return 2
            if key == "3" or key == KEY_ESCAPE:
                return 3

    def run(self, console, profile: Optional[PlayerProfile] = None) -> int:
        """Show the menu and act on the choice; give the coins earned."""
        profile = profile if profile is not None else PlayerProfile()
        pick = self._pick(console)
        if pick == 1:
            earned = 0
            while True:
                earned += self.play(console, profile)
                console.write("            다시하기: R    메뉴 돌아가기: Q\n")
                while True:
                    key = console.read_key(None)
                    key = key.lower() if key and len(key) == 1 else key
                    if key in ("r", "q", KEY_ESCAPE):
                        break
                if key != "r":
                    console.clear()
                    return earned
        if pick == 2:
            console.clear()
            console.write(_HELP)
            console.read_key(None)
            return 0
        console.clear()
        console.write("게임을 종료합니다.\n")
        return 0