[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minipix"
version = "0.1.0"
description = "Character, number and string helpers, X11 colour names and XPM decoding into in-memory pixel images"
requires-python = ">=3.10"
dependencies = []
keywords = ["xpm", "image", "pixels", "colors", "x11-colors", "string-utilities", "parsing"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Multimedia :: Graphics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minipix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
