[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "myplant"
version = "0.1.0"
description = "A small keyboard-driven terminal application for looking through your houseplants"
requires-python = ">=3.10"
dependencies = []
keywords = ["plants", "terminal", "tui", "garden", "watering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Polish",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
myplant = "myplant.app:main"

[tool.hatch.build.targets.wheel]
packages = ["myplant"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
