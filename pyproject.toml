[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oolab"
version = "0.1.0"
description = "Small object-oriented exercises: parallelograms, 16-bit integer vectors, icosahedra, 2D and complex vectors"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "geometry", "vectors", "exercises", "oop"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oolab = "oolab.cli:main"
oolab-parallelogram = "oolab.parallelogram:main"
oolab-vector = "oolab.short_vector:main"

[tool.hatch.build.targets.wheel]
packages = ["oolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
