[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "planmanage"
version = "0.1.0"
description = "Personal plan manager for tasks, habits, daily plans and daily reviews, kept in SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["planner", "tasks", "habits", "todo", "daily-review", "sqlite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
planmanage = "planmanage.cli:main"

[tool.setuptools.packages.find]
include = ["planmanage", "planmanage.*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
