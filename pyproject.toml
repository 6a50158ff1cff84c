[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bstlab"
version = "0.1.0"
description = "Binary trees and binary search trees with parent links, successor queries and Graphviz dot output"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary tree", "binary search tree", "bst", "graphviz", "dot", "data structures"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bstlab = "bstlab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bstlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
