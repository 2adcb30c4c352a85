[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zkutil"
version = "0.1.0"
description = "Small utilities for note-taking tools: optional values, FTS5 query conversion, directory walking and diffing, paging, dates and text helpers."
requires-python = ">=3.10"
keywords = ["notes", "zettelkasten", "fts5", "pager", "utilities"]
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
    "Topic :: Utilities",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zkutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
