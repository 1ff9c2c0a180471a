[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ekgui"
version = "0.1.0"
description = "Input bindings, deferred task dispatch and colour themes for a GUI toolkit"
requires-python = ">=3.10"
dependencies = []
keywords = ["gui", "input", "bindings", "themes", "tasks"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ekgui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
