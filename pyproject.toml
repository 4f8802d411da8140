[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algobox"
version = "0.1.0"
description = "A collection of classic algorithms: sorting, dynamic programming, graphs, scheduling and Sudoku solving."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "dynamic-programming",
    "graphs",
    "scheduling",
    "sudoku",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algobox"]

[tool.hatch.build.targets.sdist]
include = ["algobox", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["algobox"]
