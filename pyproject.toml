[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadgames"
version = "0.1.0"
description = "Small arcade games, visual toys and a 2D particle system built on pygame."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = [
    "games",
    "arcade",
    "particles",
    "snake",
    "asteroids",
    "arkanoid",
    "missile-command",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
quadgames-particles = "quadgames.effects:main"
quadgames-snake = "quadgames.snake:main"
quadgames-arkanoid = "quadgames.arkanoid:main"
quadgames-asteroids = "quadgames.asteroids:main"
quadgames-bunnymark = "quadgames.bunnymark:main"
quadgames-tree = "quadgames.tree:main"
quadgames-missile-command = "quadgames.missile_command:main"

[tool.hatch.build.targets.wheel]
packages = ["quadgames"]

[tool.hatch.build.targets.sdist]
include = [
    "quadgames",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
