[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roflocraft"
version = "0.1.0"
description = "A tiny block world with a first-person player, gravity and box collision, rendered with OpenGL"
requires-python = ">=3.10"
keywords = ["voxel", "opengl", "game", "collision", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "numpy",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
roflocraft = "roflocraft.app:main"

[tool.hatch.build.targets.wheel]
packages = ["roflocraft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
