[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "enginecore"
version = "0.1.0"
description = "A small 2D game engine core: game objects, components, physics, events and binary scene files."
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "physics", "entity component", "scene", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
enginecore = "enginecore.application:main"

[tool.setuptools.packages.find]
include = ["enginecore*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
