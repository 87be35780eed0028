[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mshparse"
version = "0.1.0"
description = "Command-line parsing for a small POSIX-style shell: syntax checks, tokenising, variable expansion and redirections."
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "parser", "tokenizer", "expansion", "redirection", "pipeline"]
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
    "Topic :: System :: Shells",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mshparse"]

[tool.hatch.build.targets.sdist]
include = ["mshparse", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
