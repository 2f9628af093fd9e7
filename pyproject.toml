[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tgsh"
version = "0.1.0"
description = "Building blocks for a POSIX-style shell: lexer, syntax tree, environment, aliases, history, hooks, keybindings, jobs and command lookup"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "posix", "lexer", "terminal", "keybindings", "history"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tgsh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
