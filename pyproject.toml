[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edhighway"
version = "0.1.0"
description = "Route planning helpers for Elite Dangerous: Spansh queries, EDSM request parameters, system filtering, and fleet carrier fuel and module calculations."
requires-python = ">=3.10"
keywords = ["elite dangerous", "edsm", "spansh", "route", "fleet carrier", "galaxy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "requests",
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["edhighway"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
