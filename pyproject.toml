[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linecomplete"
version = "0.1.0"
description = "Word and history based tab completion for command-line text input"
requires-python = ">=3.10"
dependencies = []
keywords = ["completion", "readline", "cli", "prompt", "history", "trie"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linecomplete = "linecomplete.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["linecomplete"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
