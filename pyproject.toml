[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csvline"
version = "0.3.0"
description = "Fast decoding of a single CSV line into Python objects"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "tsv", "parsing", "deserialization", "dataclasses"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["csvline"]

[tool.pytest.ini_options]
addopts = "-ra"
