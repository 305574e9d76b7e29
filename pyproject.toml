[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "serpentine"
version = "0.1.0"
description = "A grid-based snake arcade game with classic, survival and time-limit modes."
requires-python = ">=3.10"
keywords = ["snake", "arcade", "game", "pygame"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: End Users/Desktop",
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
serpentine = "serpentine.app:main"

[tool.hatch.build.targets.wheel]
packages = ["serpentine"]

[tool.pytest.ini_options]
addopts = "-ra"
