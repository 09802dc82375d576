[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsbasics"
version = "0.1.0"
description = "Small, readable building blocks for a first data structures course: cells, factorials, max search, sorting, linked lists, matrices and dynamic arrays."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "education",
    "linked list",
    "dynamic array",
    "matrix",
    "sorting",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsbasics = "dsbasics.basics:main"
dsbasics-factorial = "dsbasics.factorial:main"
dsbasics-findmax = "dsbasics.findmax:main"
dsbasics-sort = "dsbasics.sorting:main"

[tool.hatch.build.targets.wheel]
packages = ["dsbasics"]

[tool.hatch.build.targets.sdist]
include = ["dsbasics", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
