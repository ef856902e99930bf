[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "attractorlab"
version = "0.1.0"
description = "Explore strange attractors: iterate chaotic systems, classify them by Lyapunov exponent, colour the orbits and export point clouds."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "attractor",
    "chaos",
    "lyapunov",
    "lorenz",
    "rossler",
    "clifford",
    "de-jong",
    "point-cloud",
    "obj",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
test = ["pytest"]

[project.scripts]
attractorlab = "attractorlab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["attractorlab"]

[tool.hatch.build.targets.sdist]
include = ["attractorlab", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
