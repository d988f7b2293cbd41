[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wasteland_racers"
version = "0.1.0"
description = "Gameplay rules for a combat kart racer: karts, weapons, projectiles, track hazards, checkpoints and HUD text."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "racing", "kart", "simulation", "weapons"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wasteland_racers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
