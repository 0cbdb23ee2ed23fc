[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kvstructs"
version = "0.1.0"
description = "In-memory data structures for key-value stores: bitmaps, sharded dicts, key locks, sets, lists, skiplists and sorted sets."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bitmap",
    "skiplist",
    "sorted set",
    "quicklist",
    "linked list",
    "concurrent dict",
    "key-value",
    "data structures",
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kvstructs"]

[tool.hatch.build.targets.sdist]
include = ["kvstructs", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
