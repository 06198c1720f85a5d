[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "templegame"
version = "0.1.0"
description = "A small side-scrolling action game with a scene manager, capsule collisions and sprite-sheet animation"
requires-python = ">=3.10"
keywords = ["game", "side-scroller", "pygame", "platformer", "action"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
templegame = "templegame.scene_manager:main"

[tool.hatch.build.targets.wheel]
packages = ["templegame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
