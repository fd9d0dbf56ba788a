[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grocerytally"
version = "0.1.0"
description = "Count how often each item appears in a grocery list and browse the tally from a simple menu."
requires-python = ">=3.10"
dependencies = []
keywords = ["grocery", "word count", "frequency", "histogram", "hash table"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
test = ["pytest"]

[project.scripts]
grocerytally = "grocerytally.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["grocerytally"]

[tool.pytest.ini_options]
addopts = "-ra"
