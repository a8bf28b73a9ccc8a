[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coinflip-sim"
version = "0.0.1"
description = "A coin-flip betting simulation driven by a text frame loop, with input bindings and rolling frame-time statistics."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "coin flip", "gambling", "rolling buffer", "game loop"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coinflip-sim = "coinflip_sim.main:main"

[tool.hatch.build.targets.wheel]
packages = ["coinflip_sim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
