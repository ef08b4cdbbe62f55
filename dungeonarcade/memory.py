"""Card-matching memory game."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from typing import Optional

from dungeonarcade.profile import PlayerProfile


class CardState(enum.Enum):
    HIDDEN = enum.auto()
    REVEALED = enum.auto()
    MATCHED = enum.auto()


@dataclass
class MemoryCard:
    symbol: str = "*"
    state: CardState = CardState.HIDDEN


class InvalidChoice(ValueError):
    """Raised for a card number that is off the board or already face up."""


class MemoryBoard:
    """A square board of face-down card pairs."""

    def __init__(self, size: int = 4, rng: Optional[random.Random] = None) -> None:
        if size <= 0 or (size * size) % 2:
            raise ValueError("the board needs an even, positive number of cards")
        self.size = size
        self.rng = rng if rng is not None else random.Random()
        self.cards: list[list[MemoryCard]] = []
        self.setup()

    def setup(self) -> None:
        """Deal a shuffled pair of each symbol, starting from 'A'."""
        pairs = (self.size * self.size) // 2
        symbols = [chr(ord("A") + n) for n in range(pairs) for _ in range(2)]
        self.rng.shuffle(symbols)
        self.cards = [
            [MemoryCard(symbol) for symbol in symbols[start:start + self.size]]
            for start in range(0, len(symbols), self.size)
        ]

    def render(self) -> str:
        header = "  " + " " * self.size + "\n"
        rows = (
            " " + "".join("* " if card.state is CardState.HIDDEN else f"{card.symbol} " for card in row) + "\n"
            for row in self.cards
        )
        return header + "".join(rows)

    def all_matched(self) -> bool:
        return all(card.state is CardState.MATCHED for row in self.cards for card in row)

    def is_hidden(self, row: int, col: int) -> bool:
        return self.cards[row][col].state is CardState.HIDDEN

    def reveal(self, row: int, col: int) -> None:
        self.cards[row][col].state = CardState.REVEALED

    def hide(self, row: int, col: int) -> None:
        self.cards[row][col].state = CardState.HIDDEN

    def match(self, row: int, col: int) -> None:
        self.cards[row][col].state = CardState.MATCHED

    def symbol(self, row: int, col: int) -> str:
        return self.cards[row][col].symbol

    def position(self, number: int) -> tuple[int, int]:
        """Row and column of a card numbered from 1, row by row."""
        if not 1 <= number <= self.size * self.size:
            raise InvalidChoice("잘못된 입력입니다. 다시 시도하세요.")
        return divmod(number - 1, self.size)


class MemoryGame:
    """Turn two cards at a time until every pair is found."""

    def __init__(self, board: Optional[MemoryBoard] = None, profile: Optional[PlayerProfile] = None) -> None:
        self.board = board if board is not None else MemoryBoard()
        self.profile = profile if profile is not None else PlayerProfile()
        self.turn_count = 1

    def _pick(self, number: int) -> tuple[int, int]:
        cell = self.board.position(number)
        if not self.board.is_hidden(*cell):
            raise InvalidChoice("이미 뒤집혔습니다. 다시 시도하세요.")
        return cell

    def _settle(self, first: tuple[int, int], second: tuple[int, int]) -> bool:
        matched = self.board.symbol(*first) == self.board.symbol(*second)
        for cell in (first, second):
            if matched:
                self.board.match(*cell)
            else:
                self.board.hide(*cell)
        self.turn_count += 1
        return matched

    def choose(self, first: int, second: int) -> bool:
        """Play one turn with two card numbers; tell whether they matched."""
        a = self._pick(first)
        self.board.reveal(*a)
        try:
            b = self._pick(second)
        except InvalidChoice:
            self.board.hide(*a)
            raise
        self.board.reveal(*b)
        return self._settle(a, b)

    def reward(self) -> int:
        """Coins earned for finishing within the current number of turns."""
        if self.turn_count <= 15:
            return 8
        if self.turn_count <= 20:
            return 5
        if self.turn_count <= 30:
            return 2
        return 0

    def _ask(self, console, prompt: str) -> tuple[int, int]:
        answer = console.read_line(prompt)
        try:
            number = int(answer.strip())
        except ValueError:
            raise InvalidChoice("잘못된 입력입니다. 다시 시도하세요.") from None
        return self._pick(number)

    def run(self, console) -> int:
        """Play until the board is cleared; give the coins earned."""
        console.clear()
        console.write("카드 맞추기 게임을 시작합니다!\n")
        total = self.board.size * self.board.size

        while not self.board.all_matched():
            console.write(self.board.render())
            console.write(f"현재 턴: {self.turn_count}\n")
            try:
                first = self._ask(console, f"첫 번째 카드 번호 입력 (1 ~ {total}) : ")
            except InvalidChoice as problem:
                console.write(f"{problem}\n")
                continue

            self.board.reveal(*first)
            console.write(self.board.render())

            try:
                second = self._ask(console, f"두 번째 카드 번호 입력 (1 ~ {total}) : ")
            except InvalidChoice as problem:
                console.write(f"{problem}\n")
                self.board.hide(*first)
                continue

            self.board.reveal(*second)
            console.write(self.board.render())
            console.write("정답입니다.\n" if self._settle(first, second) else "틀렸습니다.\n")
            console.write("\n")
            console.pause(2)
            console.clear()

        earned = self.reward()
        self.profile.earn(earned)
        console.write("모든 카드를 맞췄습니다! 게임을 종료합니다!\n")
        console.write(f"총 {self.turn_count} 턴 걸렸습니다. 현재 코인 : {self.profile.coins}\n")
        console.read_line("엔터를 누르면 종료됩니다...")
        return earned