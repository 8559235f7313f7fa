[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bounceengine"
version = "0.1.0"
description = "Core of a small game engine: vectors, quaternions, binary serialization, components, worlds, inventories, quests and UI elements."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "vectors", "quaternion", "serialization", "components"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bounceengine-demo = "bounceengine.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["bounceengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
