[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xshooting"
version = "0.1.0"
description = "Core of a vertical-scrolling arcade shooter: game configuration, sprite-sheet slicing, stage map data, scene flow and a console title screen."
requires-python = ">=3.10"
keywords = ["game", "shooter", "arcade", "sprites", "scenes"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
xshooting = "xshooting.app:main"

[tool.hatch.build.targets.wheel]
packages = ["xshooting"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
