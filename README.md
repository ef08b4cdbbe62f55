# dungeonarcade

A small terminal game. You walk a corridor of rooms on a text map, and each
room holds a monster guarding a minigame. Win coins in the minigames, spend
them in the shop, and then face the boss at the end of the corridor.

## Installing

```
pip install .
```

## Playing

```
dungeonarcade
```

The game opens with a timed maze warm-up (60 seconds). Reach the exit with
`W`, `A`, `S`, `D` before the clock runs out to earn three coins. After that
the dungeon map appears. To go straight to the dungeon:

```
dungeonarcade --skip-tutorial
```

In the dungeon:

- `W`, `A`, `S`, `D` move you (`@`) around the map.
- `Space` talks to a monster standing next to you and starts its minigame.
  Once a game is over its monster disappears.
- `Q` or `Esc` leaves the game.

## The rooms

From left to right:

- **Poop dodge**: move with `A`/`D` or the arrow keys to dodge falling
  droppings. The game speeds up as your score grows. You earn one coin for
  every 300 points.
- **Dino runner**: `Space` or up jumps over cacti, `S` or down ducks under
  birds, `P` pauses. You earn one coin for every 400 points, and after a
  round `R` plays again.
- **Memory cards**: type card numbers to turn over pairs on a 4×4 board.
  Finishing within 15 turns earns 8 coins, within 20 earns 5, within 30
  earns 2.
- **Jump game**: first a reaction-speed warm-up, then five platform levels.
  You pick a character (some cost coins), collect coins and hearts, bounce
  on springs and reach the exit. Clearing every level earns 10 more coins.
- **Shop**: buy attack (1 coin), 10 extra health (1 coin) or a pet (2 coins).
- **Boss**: press `Space` to strike. The boss hits back every three seconds,
  and each pet deals 30 damage on the same beat.

## Using the pieces

The games are plain classes that you can drive from code. Each one takes a
`PlayerProfile` from `dungeonarcade.profile`, which holds coins, attack,
health and pets, and `Console` from `dungeonarcade.console` can be fed
scripted keys and lines instead of reading the terminal.

```python
from dungeonarcade.profile import PlayerProfile
from dungeonarcade.shop import Shop

profile = PlayerProfile(coins=3)
shop = Shop(profile)
print(shop.purchase(1))   # buy attack
print(profile.attack, profile.coins)
```

`dungeonarcade.cards` has `Card` and `Hand`, which score a blackjack hand
with aces counted low when the hand would otherwise bust:

```python
from dungeonarcade.cards import Card, Hand

hand = Hand()
hand.add(Card("♠", "A", 11))
hand.add(Card("♥", "K", 10))
print(hand.score())  # 21
```

## What it does not do

There is no card deck and no playable blackjack round: `dungeonarcade.cards`
only scores and shows hands. The shop therefore offers no gambling, only the
three upgrades above. Coins and upgrades are not saved between sessions.

## Running the tests

```
pip install ".[test]"
pytest
```