"""A quick reaction-time warm-up game."""

from __future__ import annotations

import random
import time
from typing import Optional

FAST_MS = 200
QUICK_MS = 400


def rate_reaction(milliseconds: int) -> str:
    """A short verdict on a reaction time given in milliseconds."""
    if milliseconds < FAST_MS:
        return "반응 속도 최고예요!"
    if milliseconds < QUICK_MS:
        return "꽤 빠르네요!"
    return "조금 느려요! 다시 도전해보세요."


def run(console, rng: Optional[random.Random] = None) -> int:
    """Wait a random moment, then time how fast a key is pressed; give the milliseconds."""
    rng = rng if rng is not None else random.Random()

    console.write("=== 반응 속도 측정 게임 ===\n")
    console.read_line("준비되면 Enter 키를 누르세요...")

    wait = rng.randrange(5) + 1
    console.write("준비...\n")
    console.pause(wait)

    console.write("\n지금! 아무 키나 누르세요!\n")
    started = time.monotonic()
    console.read_key(None)
    elapsed = int((time.monotonic() - started) * 1000)

    console.write(f"\n당신의 반응 속도는 {elapsed} ms 입니다!\n")
    console.write(rate_reaction(elapsed))
    console.read_line("\n\nEnter키를 누르면 종료됩니다...")
    return elapsed