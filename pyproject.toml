[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minilang"
version = "0.0.1"
description = "A small dynamically typed scripting language with a tree-walking interpreter and REPL"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "language", "repl", "lexer", "parser", "pratt"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minilang = "minilang.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minilang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
