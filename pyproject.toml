[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilequest"
version = "0.1.0"
description = "A small tile-based role-playing game with a component-driven main menu and a scrolling map view."
requires-python = ">=3.10"
keywords = ["game", "role-playing", "tiles", "pygame", "entity-component"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tilequest = "tilequest.game:main"

[tool.hatch.build.targets.wheel]
packages = ["tilequest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
