[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftlab"
version = "0.1.0"
description = "Ordered containers on a red-black tree, an A* grid pathfinder and a grid ray-casting toolkit"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "containers",
    "red-black-tree",
    "vector",
    "stack",
    "sorted-map",
    "sorted-set",
    "a-star",
    "pathfinding",
    "raycasting",
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ftlab"]

[tool.hatch.build.targets.sdist]
include = ["ftlab", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
