[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hackassist"
version = "0.1.0"
description = "Narrow down the password in the Fallout terminal hacking minigame"
requires-python = ">=3.10"
keywords = ["fallout", "hacking", "minigame", "solver", "puzzle"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hackassist = "hackassist.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hackassist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
