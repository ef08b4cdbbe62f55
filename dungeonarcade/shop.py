"""The dungeon shop where coins buy upgrades."""

from __future__ import annotations

from typing import Optional

from dungeonarcade.profile import InsufficientCoins, PlayerProfile

ATTACK_PRICE = 1
HP_PRICE = 1
PET_PRICE = 2
HP_BONUS = 10

_PET_GREETINGS = {
    1: "🐶 귀여운 펫이 당신을 따라다니기 시작합니다!\n",
    2: "🐱 두 번째 펫도 합류했어요! 시끌벅적~\n",
    3: "🐰 세 번째 펫이 뒤뚱뒤뚱 따라옵니다! 귀여움 +100\n",
}


class Shop:
    """Sells attack, health and pets for coins."""

    def __init__(self, profile: Optional[PlayerProfile] = None) -> None:
        self.profile = profile if profile is not None else PlayerProfile()

    def buy_attack(self) -> str:
        self.profile.spend(ATTACK_PRICE)
        self.profile.attack += 1
        return f"🗡 공격력이 1 증가했습니다! 현재 공격력: {self.profile.attack}\n"

    def buy_hp(self) -> str:
        self.profile.spend(HP_PRICE)
        self.profile.hp += HP_BONUS
        return f"❤ 체력이 10 증가했습니다! 현재 체력: {self.profile.hp}\n"

    def buy_pet(self) -> str:
        self.profile.spend(PET_PRICE)
        self.profile.pets += 1
        count = self.profile.pets
        greeting = _PET_GREETINGS.get(
            count, f"🐾 새로운 펫이 무리를 이루어 당신을 따라다닙니다! (총 {count} 마리)\n"
        )
        return f"🐾 펫을 샀습니다! 현재 펫 수: {count} 마리\n" + greeting

    def purchase(self, choice: int) -> str:
        """Buy the item with this menu number; give the shopkeeper's reply."""
        actions = {1: self.buy_attack, 2: self.buy_hp, 3: self.buy_pet}
        if choice not in actions:
            raise ValueError("잘못된 입력입니다.")
        return actions[choice]()

    def render(self) -> str:
        p = self.profile
        return (
            "=========================================\n"
            "                 🏪 상점 🏪\n"
            "=========================================\n"
            "\n"
            "        (\\_ _/)   어서오게, 여행자!\n"
            "        ( •w•)    좋은 물건들이 있지~\n"
            "        / >🍗\n"
            "\n"
            "-----------------------------------------\n"
            "1. 🗡 공격력 증가 아이템 (1 코인)\n"
            "2. ❤ 체력 증가 아이템 (1 코인)\n"
            "3. 🐾 귀여운 펫 (2 코인, 3초마다 10의 데미지)\n"
            "-----------------------------------------\n"
            f"당신의 코인: {p.coins}\n"
            f"현재 공격력: {p.attack} / 체력: {p.hp} / 펫: {p.pets} 마리\n"
            "-----------------------------------------\n"
            "구매할 아이템 번호를 입력하세요 (0: 종료): "
        )

    def enter(self, console) -> None:
        """Serve the player until they choose to leave."""
        while True:
            console.clear()
            answer = console.read_line(self.render()).strip()
            try:
                choice = int(answer)
            except ValueError:
                choice = -1

            if choice == 0:
                console.write("상점을 떠납니다...\n")
                console.pause(3)
                return
            try:
                console.write(self.purchase(choice))
            except InsufficientCoins:
                console.write("코인이 부족합니다!\n")
            except ValueError as problem:
                console.write(f"{problem}\n")
            console.pause(3)
            console.write("계속하려면 아무 키나 누르세요...\n")
            console.read_key(None)