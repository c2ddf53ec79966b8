[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ivo"
version = "0.1.0"
description = "Space-time (2+1D) numerical building blocks: sparse matrices, GMRES, points, edges and polygons, diagram files and problem data."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "space-time",
    "sparse matrices",
    "gmres",
    "geometry",
    "mesh",
    "convection-diffusion-reaction",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ivo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
