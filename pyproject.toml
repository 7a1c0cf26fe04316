[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maple"
version = "0.1.0"
description = "Building blocks for 2D games: an entity-component system, an asset registry and pygame drawing helpers"
requires-python = ">=3.10"
keywords = ["game engine", "ecs", "entity component system", "2d", "pygame", "assets"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["maple"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
