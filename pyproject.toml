[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "go2sport"
version = "0.1.0"
description = "Build and publish sport-mode requests for a quadruped robot, with stand/sit and walk routines"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "quadruped", "sport mode", "locomotion", "requests"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["go2sport"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
