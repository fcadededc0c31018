[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "actorforces"
version = "0.1.0"
description = "Per-frame force, impulse and torque appliers for rigid bodies, with a phase-tracking accelerating threshold"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "simulation", "force", "torque", "impulse", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["actorforces"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
