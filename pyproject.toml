[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "darkalliance"
version = "0.1.0"
description = "Engine pieces of a console action role-playing game: GS memory allocation, palettes, textures, pads, menus and text."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "palette", "texture", "allocator", "menu", "gamepad"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["darkalliance"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
