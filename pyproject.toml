[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "roomcrawl"
version = "0.1.0"
description = "Game-logic core for a top-down room crawler: vectors, assets, state machines, collisions, input, camera, animation and enemy behaviour"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "fsm", "collision", "animation", "camera", "roguelike"]
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
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["roomcrawl*"]

[tool.pytest.ini_options]
addopts = "-ra"
