"""Player progress shared between the dungeon's games."""

from __future__ import annotations

from dataclasses import dataclass


class InsufficientCoins(Exception):
    """Raised when a purchase costs more coins than the player holds."""

    def __init__(self, needed: int, available: int) -> None:
        super().__init__(f"need {needed} coins, have {available}")
        self.needed = needed
        self.available = available


@dataclass
class PlayerProfile:
    """Coins and stats that carry over from one game to the next."""

    coins: int = 0
    attack: int = 1
    hp: int = 100
    pets: int = 0

    def spend(self, amount: int) -> None:
        """Take coins away, refusing if the player cannot afford it."""
        if amount < 0:
            raise ValueError("amount must not be negative")
        if amount > self.coins:
            raise InsufficientCoins(amount, self.coins)
        self.coins -= amount

    def earn(self, amount: int) -> None:
        """Add coins to the player's purse."""
        if amount < 0:
            raise ValueError("amount must not be negative")
        self.coins += amount