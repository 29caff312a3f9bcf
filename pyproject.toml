[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plotexpr"
version = "0.1.0"
description = "Plot a one-variable math expression as a text chart in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["plot", "ascii", "expression", "rpn", "terminal", "graph"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
plotexpr = "plotexpr.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["plotexpr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
