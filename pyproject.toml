[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pagebuffer"
version = "0.1.0"
description = "A page-file storage manager and buffer pool with FIFO, LRU, LRU-K, CLOCK and LFU replacement."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "database",
    "buffer pool",
    "page file",
    "storage manager",
    "page replacement",
    "lru",
    "fifo",
    "clock",
    "lfu",
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
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pagebuffer"]

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
files = ["pagebuffer"]
