[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchtrees"
version = "0.1.0"
description = "Binary search trees and self-balancing AVL trees with in-order iteration and ASCII tree printing"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "avl", "balanced tree", "data structures", "map"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
searchtrees-demo = "searchtrees.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["searchtrees"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
