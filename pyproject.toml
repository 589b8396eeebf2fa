[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptcrawl"
version = "0.1.0"
description = "Building blocks for a turn-based dungeon crawler: generated crypts, fog of war, turn order, combat events and sprite animation"
requires-python = ">=3.10"
keywords = ["roguelike", "dungeon", "game", "procedural-generation", "shadowcasting", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cryptcrawl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
