[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "croutsolve"
version = "1.0.0"
description = "Crout LU solvers for full, symmetric and tridiagonal systems over floats, mpmath numbers and outward-rounded intervals"
requires-python = ">=3.10"
dependencies = [
    "mpmath",
]
keywords = [
    "interval arithmetic",
    "directed intervals",
    "Crout",
    "LU decomposition",
    "linear systems",
    "tridiagonal",
    "multiprecision",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["croutsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
