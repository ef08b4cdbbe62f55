"""Dodge the falling droppings for as long as possible."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from dungeonarcade.console import KEY_ESCAPE, KEY_LEFT, KEY_RIGHT
from dungeonarcade.profile import PlayerProfile

SCORE_PER_COIN = 300
MAX_SPAWN_PROBABILITY = 0.9
MIN_DELAY_MS = 20

_TITLE = (
    "=====================================\n"
    "           똥   피   하   기         \n"
    "=====================================\n\n"
)

_HELP = (
    "[조작법]\n"
    " - 이동: A/D 또는 ←/→\n"
    " - 일시정지: P\n"
    " - 게임 중 메뉴로: Q (게임 종료)\n\n"
    "[코인 규칙]\n"
    "300점마다 1코인\n"
    "아무 키나 누르면 메뉴로 돌아갑니다..."
)


@dataclass(frozen=True)
class PoopConfig:
    width: int = 55
    height: int = 31
    player_y: int = 30
    base_delay: int = 80
    speed_gain_per_level: int = 5
    level_up_every: int = 150
    base_spawn_prob: float = 0.18
    spawn_inc_per_level: float = 0.03


@dataclass
class Poop:
    x: int
    y: int


@dataclass
class _Round:
    poops: list[Poop] = field(default_factory=list)
    player_x: int = 0
    score: int = 0
    level: int = 1
    running: bool = True
    paused: bool = False


class PoopGame:
    """Game logic and screen for the dodging game."""

    def __init__(
        self,
        config: Optional[PoopConfig] = None,
        rng: Optional[random.Random] = None,
        profile: Optional[PlayerProfile] = None,
    ) -> None:
        self.config = config if config is not None else PoopConfig()
        self.rng = rng if rng is not None else random.Random()
        self.profile = profile if profile is not None else PlayerProfile()
        self.best_score = 0
        self.poops: list[Poop] = []
        self.player_x = 0
        self.score = 0
        self.level = 1
        self.running = True
        self.paused = False
        self.reset()

    def reset(self) -> None:
        """Start a new round with the player in the middle."""
        self.poops = []
        self.score = 0
        self.level = 1
        self.running = True
        self.paused = False
        self.player_x = self.config.width // 2

    def handle_key(self, key: Optional[str]) -> None:
        if key is None:
            return
        if len(key) == 1:
            key = key.lower()
        if key in ("a", KEY_LEFT):
            self.player_x = max(0, self.player_x - 1)
        elif key in ("d", KEY_RIGHT):
            self.player_x = min(self.config.width - 1, self.player_x + 1)
        elif key == "p":
            self.paused = not self.paused
        elif key == "q":
            self.running = False

    def spawn_probability(self) -> float:
        cfg = self.config
        chance = cfg.base_spawn_prob + (self.level - 1) * cfg.spawn_inc_per_level
        return min(chance, MAX_SPAWN_PROBABILITY)

    def spawn(self) -> list[Poop]:
        """Roll twice for a new dropping at the top; give the ones added."""
        chance = self.spawn_probability()
        added = []
        for _ in range(2):
            if self.rng.random() < chance:
                poop = Poop(self.rng.randrange(self.config.width), 0)
                self.poops.append(poop)
                added.append(poop)
        return added

    def tick(self) -> None:
        """Advance one frame: level, spawning, falling, collision and score."""
        cfg = self.config
        self.level = max(1, self.score // cfg.level_up_every + 1)
        self.spawn()
        for poop in self.poops:
            poop.y += 1
        self.poops = [poop for poop in self.poops if poop.y < cfg.height]
        if any(poop.y == cfg.player_y and poop.x == self.player_x for poop in self.poops):
            self.running = False
        self.score += 1

    def delay(self) -> int:
        """Frame delay in milliseconds for the current level."""
        cfg = self.config
        return max(MIN_DELAY_MS, cfg.base_delay - (self.level - 1) * cfg.speed_gain_per_level)

    def coins_earned(self) -> int:
        return self.score // SCORE_PER_COIN

    def render(self) -> str:
        cfg = self.config
        grid = [[" "] * cfg.width for _ in range(cfg.height)]
        for poop in self.poops:
            if 0 <= poop.y < cfg.height and 0 <= poop.x < cfg.width:
                grid[poop.y][poop.x] = "$"
        if 0 <= cfg.player_y < cfg.height:
            grid[cfg.player_y][self.player_x] = "@"
        header = (
            f"[똥피하기]  점수: {self.score}   레벨: {self.level}"
            f"   최고점: {self.best_score}  현재코인: {self.profile.coins}\n"
            "   (A/D 또는 ←/→ 이동, P 일시정지, Q 종료)\n\n"
        )
        return header + "".join("".join(row) + "\n" for row in grid)

    def play(self, console, profile: Optional[PlayerProfile] = None) -> int:
        """Play one round until hit or quit; give the coins earned."""
        if profile is not None:
            self.profile = profile
        self.reset()
        console.clear()
        while self.running:
            self.handle_key(console.read_key(self.delay() / 1000.0))
            if not self.paused:
                self.tick()
            console.write_at(0, 0, self.render())

        self.best_score = max(self.best_score, self.score)
        earned = self.coins_earned()
        self.profile.earn(earned)

        console.write_at(0, 0, "")
        console.write(
            "\n\n================ GAME OVER ================\n"
            f" 점수: {self.score}  최고점수: {self.best_score}  현재 코인: {self.profile.coins}\n"
        )
        console.pause(3)
        console.clear()
        return earned

    def _pick(self, console) -> int:
        console.clear()
        console.write(_TITLE)
        console.write("  1) 시작\n  2) 조작법 보기\n  3) 종료\n\n번호를 선택하세요: ")
        while True:
            key = console.read_key(None)
            if key == "1":
                console.clear()
                return 1
            if key == "2":
                return 2
            if key == "3" or key == KEY_ESCAPE:
                return 3

    def run(self, console, profile: Optional[PlayerProfile] = None) -> int:
        """Show the menu and act on the choice; give the coins earned."""
        pick = self._pick(console)
        if pick == 1:
            return self.play(console, profile)
        if pick == 2:
            console.clear()
            console.write(_TITLE)
            console.write(_HELP)
            console.read_key(None)
        return 0