[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonarcade"
version = "0.1.0"
description = "A terminal dungeon crawl where every room hides an arcade minigame"
requires-python = ">=3.10"
dependencies = [
    "blessed",
]
keywords = ["game", "terminal", "dungeon", "arcade", "minigames", "maze", "roguelike"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dungeonarcade = "dungeonarcade.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeonarcade"]

[tool.pytest.ini_options]
addopts = "-ra"
