[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cutilkit"
version = "0.1.0"
description = "Small utility toolkit: bit arrays, linked lists, stacks, queues, graphs, permutations, timing, string and filesystem helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bitarray",
    "linked-list",
    "stack",
    "queue",
    "graph",
    "permutations",
    "timing",
    "strings",
    "filesystem",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cutilkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
