[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacecorridor"
version = "0.1.0"
description = "A small vertical-scrolling arcade game: steer a spaceship through a meteorite corridor to the finish line."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "spaceship", "meteorites"]
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
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spacecorridor = "spacecorridor.main:main"

[tool.hatch.build.targets.wheel]
packages = ["spacecorridor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
