[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "promptdir"
version = "0.1.0"
description = "Path contraction and fish-style abbreviation for shell prompt directory segments"
requires-python = ">=3.10"
dependencies = [
    "regex",
]
keywords = ["prompt", "shell", "directory", "path", "fish"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["promptdir"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
