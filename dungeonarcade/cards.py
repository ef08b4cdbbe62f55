"""Playing cards and blackjack hands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

BLACKJACK = 21


@dataclass(frozen=True)
class Card:
    """A playing card: suit mark, rank label and blackjack value."""

    mark: str
    rank: str
    value: int

    def __str__(self) -> str:
        return f"{self.mark} {self.rank}"


@dataclass
class Hand:
    """The cards one blackjack player holds."""

    cards: list[Card] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def add(self, card: Card) -> None:
        self.cards.append(card)

    def score(self) -> int:
        """Total value, counting aces as low while the hand would bust."""
        total = sum(card.value for card in self.cards)
        aces = sum(1 for card in self.cards if card.rank == "A")
        while total > BLACKJACK and aces > 0:
            total -= 10
            aces -= 1
        return total

    def is_bust(self) -> bool:
        return self.score() > BLACKJACK

    def clear(self) -> None:
        self.cards.clear()

    def render(self, hide: bool = False) -> str:
        """One line per card; with hide, the first card is face down and no score is shown."""
        lines = [
            "[Card]" if hide and position == 0 else str(card)
            for position, card in enumerate(self.cards)
        ]
        if not hide:
            lines.append(f"Score : {self.score()}")
        return "".join(f"{line}\n" for line in lines)