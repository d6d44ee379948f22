[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshgen"
version = "0.1.0"
description = "Six-node triangular surface meshes of the unit sphere, with connectivity and geometry analysis"
requires-python = ">=3.10"
keywords = ["mesh", "icosphere", "sphere", "quadratic triangle", "boundary element", "quadrature", "vtk"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
meshgen = "meshgen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["meshgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
