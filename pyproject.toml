[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "adultbench"
version = "0.1.0"
description = "Analyses of the UCI Adult census dataset and scalability benchmarks of classic data structures over it"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "adult dataset",
    "census",
    "data analysis",
    "benchmark",
    "avl tree",
    "skip list",
    "hash table",
    "linked list",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adultbench-report = "adultbench.report:main"

[tool.setuptools.packages.find]
include = ["adultbench*"]

[tool.pytest.ini_options]
addopts = "-ra"
