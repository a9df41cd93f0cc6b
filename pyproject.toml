[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zeroengine"
version = "0.1.0"
description = "A small 2D game engine with an entity-component system, scenes, sprites, colliders and a sprite animation state machine."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "game-engine",
    "2d",
    "ecs",
    "entity-component-system",
    "sprites",
    "animation",
    "collision",
]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["zeroengine"]

[tool.hatch.build.targets.sdist]
include = [
    "zeroengine",
    "tests",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
check_untyped_defs = true
