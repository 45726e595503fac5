[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "protochess"
version = "0.1.0"
description = "Chess positions on variant boards up to 16x16, with custom piece movement patterns, bitboards and Zobrist hashing"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "chess-variants", "bitboard", "zobrist", "fen"]
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
    "Topic :: Games/Entertainment :: Board Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["protochess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
