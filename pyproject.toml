[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calcabobe"
version = "0.1.0"
description = "A small integer calculator driven by key presses, with a line-oriented command interface."
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "integer", "arithmetic", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
calcabobe = "calcabobe.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["calcabobe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
