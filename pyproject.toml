[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sexc"
version = "0.1.0"
description = "A small lexer and stack-based bytecode virtual machine for a toy programming language"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "tokenizer", "bytecode", "virtual machine", "interpreter"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sexc = "sexc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sexc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
