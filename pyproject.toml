[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rqstore"
version = "0.1.0"
description = "Building blocks for a replicated SQLite store: database snapshots, cluster membership, recovery checks and transport wrappers."
requires-python = ">=3.11"
dependencies = []
keywords = ["sqlite", "raft", "snapshot", "cluster", "database"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rqstore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
