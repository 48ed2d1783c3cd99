[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ugine"
version = "0.1.0"
description = "Logic core of a small 2D game engine: collision math, input gestures, skeletal animation, particles, tile maps, bitmap fonts and GUI controls"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["game", "2d", "engine", "collision", "particles", "gui", "tilemap", "skeleton"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ugine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
