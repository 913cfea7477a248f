[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockdeque"
version = "0.1.0"
description = "A double-ended queue stored in fixed-size blocks, with random access and cheap pushes at both ends."
requires-python = ">=3.10"
dependencies = []
keywords = ["deque", "double-ended queue", "container", "data structure", "blocks"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
blockdeque = "blockdeque.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["blockdeque"]

[tool.hatch.build.targets.sdist]
include = ["blockdeque", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
