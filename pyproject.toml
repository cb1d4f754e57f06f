[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "judgebook"
version = "0.1.0"
description = "Solutions to a collection of online-judge problems: selection, binary search on the answer, geometry, backtracking and counting DP."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "competitive-programming",
    "binary-search",
    "dynamic-programming",
    "backtracking",
    "n-queens",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
judgebook = "judgebook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["judgebook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
