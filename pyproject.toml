[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "silogvend"
version = "1.1.1"
description = "A terminal simulation of a silog meal vending machine with add-ons, change-making and owner maintenance menus."
requires-python = ">=3.10"
dependencies = []
keywords = ["vending machine", "simulation", "terminal", "silog", "cash register"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
silogvend = "silogvend.cli:main"

[tool.setuptools.packages.find]
include = ["silogvend*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
