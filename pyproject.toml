[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pockets"
version = "0.1.0"
description = "2D sprite, sprite sheet, image packing and animation helpers"
requires-python = ">=3.10"
keywords = ["sprites", "sprite-sheet", "image-packing", "animation", "2d", "graphics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = ["pillow"]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pockets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
