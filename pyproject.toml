[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pizzeria-engine"
version = "0.1.0"
description = "Frame-driven game logic for a pizzeria stealth simulation: animation, collision, deferred events, camera overlays and a patrolling boss."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "simulation", "collision", "animation", "state-machine"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pizzeria_engine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
