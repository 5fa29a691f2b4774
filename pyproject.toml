[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sheepfight"
version = "0.1.0"
description = "Two-player lane-pushing sheep battle game"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "sheep", "two-player", "lanes", "strategy", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sheepfight = "sheepfight.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sheepfight"]

[tool.pytest.ini_options]
addopts = "-ra"
