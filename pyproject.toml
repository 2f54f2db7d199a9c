[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lovely"
version = "0.1.0"
description = "Lexer, parser and type-checker data model for the Lovely programming language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "parser", "pratt parser", "programming language"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lovely"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
