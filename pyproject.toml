[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "canchagame"
version = "0.1.0"
description = "Playing field, player and enemy logic for a grid-based bomber arcade game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "bomber", "grid", "sprites"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["canchagame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
