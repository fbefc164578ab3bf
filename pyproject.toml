[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "berquest"
version = "0.1.0"
description = "A tile-based collect-and-escape puzzle game played on .ber map files"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "tile", "maze", "pygame", "ber"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
berquest = "berquest.app:main"

[tool.hatch.build.targets.wheel]
packages = ["berquest"]

[tool.pytest.ini_options]
addopts = "-ra"
