[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asciinum"
version = "8.2.5"
description = "Exact tokenizing of ASCII decimal number strings and parsing of fixed-width integers in bases 2 to 36"
requires-python = ">=3.10"
dependencies = []
keywords = ["parsing", "number", "decimal", "integer", "tokenizer", "json", "fortran"]
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
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["asciinum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
