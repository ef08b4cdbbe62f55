"""Terminal dungeon crawl with a maze warm-up, arcade minigames, a shop and a boss fight."""

__version__ = "0.1.0"