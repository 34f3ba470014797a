[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spellhaven"
version = "0.1.0"
description = "Engine-independent game logic for a voxel world: level-of-detail chunk quad trees, task scheduling, player movement, animations and tile constraints"
requires-python = ">=3.10"
dependencies = []
keywords = ["voxel", "game", "quadtree", "level-of-detail", "wave-function-collapse"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spellhaven"]

[tool.pytest.ini_options]
addopts = "-ra"
