[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loutils"
version = "0.1.0"
description = "Collection, numeric, string, timing and retry helpers for everyday Python code"
requires-python = ">=3.10"
dependencies = []
keywords = ["collections", "functional", "utilities", "retry", "debounce", "throttle", "strings"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["loutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
