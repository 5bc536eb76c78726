[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polymesher"
version = "0.1.0"
description = "Spatial vector and matrix helpers, geometric algorithms and cuboid shell generation for polyhedral meshing"
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "geometry", "polyhedron", "vector", "matrix", "intersection"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["polymesher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
