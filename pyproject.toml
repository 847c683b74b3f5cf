[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jagcache"
version = "0.1.0"
description = "Decoders for game cache config formats and sprites, with helpers for building map tiles"
requires-python = ">=3.10"
dependencies = ["pillow"]
keywords = ["cache", "sprites", "map", "decoder", "tiles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: File Formats",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jagcache"]

[tool.pytest.ini_options]
addopts = "-ra"
