[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raycaster"
version = "0.1.0"
description = "A small first-person raycasting maze viewer with an XPM image reader and X11 colour table"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "maze", "xpm", "pygame", "first-person"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
raycaster = "raycaster.game:main"

[tool.hatch.build.targets.wheel]
packages = ["raycaster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
