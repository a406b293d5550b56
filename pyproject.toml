[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "densealg"
version = "0.1.0"
description = "Small dense vector and matrix types with element-wise arithmetic and dot products"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "matrix", "linear algebra", "dense"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["densealg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
