"""The boss fight at the end of the dungeon."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Optional

from dungeonarcade.profile import PlayerProfile

BOSS_MAX_HP = 1000
BOSS_ATTACK = 20
PET_DAMAGE = 30
ATTACK_INTERVAL = 3.0
REDRAW_INTERVAL = 0.2
FRAME = 0.01
BAR_WIDTH = 30

_BOSS_ART = (
    "\n"
    "       /^^^^^^^^^^^\\\n"
    "      /             \\\n"
    "     |   (o)   (o)   |\n"
    "     |       ^       |\n"
    "     |     '-'       |\n"
    "      \\   \\___/     /\n"
    "       \\___________/\n"
)


def hp_bar(name: str, hp: int, max_hp: int, width: int = BAR_WIDTH) -> str:
    """A one-line health bar such as 'Boss [■■■   ] 50/100'."""
    if max_hp <= 0:
        raise ValueError("max_hp must be positive")
    if width < 0:
        raise ValueError("width must not be negative")
    filled = int(hp / max_hp * width)
    filled = max(0, min(filled, width))
    bar = "■" * filled + " " * (width - filled)
    return f"{name} [{bar}] {hp}/{max_hp}\n"


class BossBattle:
    """A real-time fight: the player strikes, the boss and pets hit every few seconds."""

    def __init__(
        self,
        profile: Optional[PlayerProfile] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.profile = profile if profile is not None else PlayerProfile()
        self.boss_hp = BOSS_MAX_HP
        self.boss_attack = BOSS_ATTACK
        self.now_hp = self.profile.hp
        self._clock = clock
        started = clock()
        self._last_boss_attack = started
        self._last_pet_attack = started

    def player_attack(self) -> str:
        """Strike the boss once with the player's attack power."""
        damage = self.profile.attack
        self.boss_hp = max(0, self.boss_hp - damage)
        return f">> 당신이 공격하여 보스에게 {damage} 데미지를 입혔습니다!\n"

    def update(self, now: Optional[float] = None) -> list[str]:
        """Let the boss and the pets attack when their time has come; give the messages."""
        if now is None:
            now = self._clock()
        messages = []
        if now - self._last_boss_attack >= ATTACK_INTERVAL:
            self.now_hp = max(0, self.now_hp - self.boss_attack)
            messages.append(f"🔥 보스가 강력한 공격을 가해 {self.boss_attack} 피해를 입었습니다!\n")
            self._last_boss_attack = now
        if self.profile.pets > 0 and now - self._last_pet_attack >= ATTACK_INTERVAL:
            damage = self.profile.pets * PET_DAMAGE
            self.boss_hp = max(0, self.boss_hp - damage)
            messages.append(f"🐾 펫들이 달려들어 보스에게 {damage} 피해를 입혔습니다!\n")
            self._last_pet_attack = now
        return messages

    def is_over(self) -> bool:
        return self.now_hp <= 0 or self.boss_hp <= 0

    def won(self) -> bool:
        return self.boss_hp <= 0

    def render(self) -> str:
        p = self.profile
        return "".join(
            [
                "=================== ⚔ 보스 전투 ⚔ ===================\n\n",
                _BOSS_ART,
                hp_bar("보스 HP", self.boss_hp, BOSS_MAX_HP),
                "\n",
                hp_bar("플레이어 HP", self.now_hp, max(p.hp, 1)),
                f"플레이어 공격력: {p.attack}\n",
                f"펫 수: {p.pets} (3초마다 {p.pets * PET_DAMAGE} 데미지)\n",
                "-----------------------------------------------------\n",
                "스페이스바: 공격   |   보스는 3초마다 공격합니다!\n",
                "=====================================================\n",
            ]
        )

    def start(self, console) -> bool:
        """Fight until one side falls; give True when the boss was beaten."""
        last_draw: Optional[float] = None
        while not self.is_over():
            key = console.read_key(FRAME)
            if key == " ":
                console.write(self.player_attack())
            now = self._clock()
            for message in self.update(now):
                console.write(message)
            if last_draw is None or now - last_draw >= REDRAW_INTERVAL:
                console.clear()
                console.write(self.render())
                last_draw = now

        console.clear()
        console.write(self.render())
        if self.won():
            console.write("\n🎉 승리했습니다! 보스를 쓰러뜨렸습니다!\n")
        else:
            console.write("\n💀 패배했습니다... 플레이어가 쓰러졌습니다...\n")
        console.pause(3)
        console.write("계속하려면 아무 키나 누르세요...\n")
        console.read_key(None)
        return self.won()