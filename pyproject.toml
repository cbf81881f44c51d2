[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boidsim"
version = "0.1.0"
description = "Grid-bucketed boid flocking: spatial hashing, behaviour states, neighbour classification and unit data"
requires-python = ">=3.10"
dependencies = []
keywords = ["boids", "flocking", "simulation", "spatial-hash", "steering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["boidsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
