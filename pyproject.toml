[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rescuesim"
version = "0.1.0"
description = "A small text-mode hostage rescue mission simulation"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "game", "stealth", "rescue", "text"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Polish",
    "Operating System :: OS Independent",
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
rescuesim = "rescuesim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rescuesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
