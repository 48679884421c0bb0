[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonquest"
version = "0.1.0"
description = "Building blocks for a turn-based grid dungeon crawler: maps, player, enemies, boss, abilities and comma-separated level loading."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "dungeon", "grid", "turn-based", "role-playing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Natural Language :: English",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dungeonquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
