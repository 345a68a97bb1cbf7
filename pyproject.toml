[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parlourkit"
version = "0.1.0"
description = "A terminal parlour of small programs: a bakery order desk, hangman and a number guessing game"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "games", "hangman", "number-guessing", "bakery", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parlourkit = "parlourkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["parlourkit"]

[tool.pytest.ini_options]
addopts = "-ra"
