[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dnadb"
version = "0.1.0"
description = "An in-memory DNA sequence database built on an open-addressing hash table with incremental rehashing."
requires-python = ">=3.10"
dependencies = []
keywords = ["dna", "hash table", "open addressing", "incremental rehash", "bioinformatics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dnadb-demo = "dnadb.driver:main"

[tool.hatch.build.targets.wheel]
packages = ["dnadb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
