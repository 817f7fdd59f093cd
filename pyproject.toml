[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iterkit"
version = "0.1.0"
description = "Iterator adaptors and helpers: lookahead, put-back, merge-joins, strict zipping, permutations, power sets, tuples and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "iterator",
    "itertools",
    "adaptor",
    "generator",
    "peek",
    "merge-join",
    "zip",
    "permutations",
    "powerset",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["iterkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
