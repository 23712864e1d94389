[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bouncy"
version = "0.1.0"
description = "A small 2D simulation of balls bouncing elastically off each other and the walls of a window"
requires-python = ">=3.10"
keywords = ["simulation", "physics", "elastic collision", "pygame", "balls"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bouncy = "bouncy.main:main"

[tool.hatch.build.targets.wheel]
packages = ["bouncy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
