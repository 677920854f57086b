[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashoff"
version = "0.1.0"
description = "Hash table workbench: string hash functions, a chained hash set, an interactive command interpreter and a console demo menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash table", "hash function", "chaining", "education", "repl"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hashoff"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
