[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcadebox"
version = "0.1.0"
description = "Small terminal games: Math-alas, a boss battle, Pac-Man, Snake and Ladders, Bingo, Pong and a game-store receipt."
requires-python = ">=3.10"
dependencies = []
keywords = ["games", "terminal", "arcade", "pacman", "pong", "bingo", "snakes-and-ladders"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arcadebox = "arcadebox.menu:main"
arcadebox-bingo = "arcadebox.bingo:main"
arcadebox-store = "arcadebox.gamestore:main"
arcadebox-pong = "arcadebox.pong:main"

[tool.hatch.build.targets.wheel]
packages = ["arcadebox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
