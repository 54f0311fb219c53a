[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lstheme"
version = "0.1.0"
description = "Parse LS_COLORS and EXA_COLORS into terminal styles for a file-listing theme"
requires-python = ">=3.10"
dependencies = []
keywords = ["ls_colors", "exa_colors", "ansi", "terminal", "colours", "theme"]
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
    "Topic :: Terminals",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lstheme"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
