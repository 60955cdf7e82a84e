[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "argochess"
version = "0.5.1"
description = "Building blocks of a chess engine: move encoding, transposition table, evaluation, time management and UCI helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "engine", "uci", "transposition-table", "evaluation"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["argochess"]

[tool.pytest.ini_options]
addopts = "-ra"
