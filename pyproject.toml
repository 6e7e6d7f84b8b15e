[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fenwicklab"
version = "0.1.0"
description = "Fenwick tree with an interactive console for generating, running, verifying and benchmarking range-sum test cases"
requires-python = ">=3.10"
dependencies = []
keywords = ["fenwick tree", "binary indexed tree", "range sum", "benchmark", "test generation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fenwicklab = "fenwicklab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fenwicklab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
