[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "board_game"
version = "0.1.0"
description = "A small board-game skeleton: board model, terminal ANSI helpers and an asyncio manager/executor message loop"
requires-python = ">=3.10"
dependencies = []
keywords = ["board game", "asyncio", "ansi", "terminal", "game loop"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[project.scripts]
board-game = "board_game.app:main"

[tool.hatch.build.targets.wheel]
packages = ["board_game"]

[tool.pytest.ini_options]
addopts = "-ra"
