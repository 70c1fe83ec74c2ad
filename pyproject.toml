[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "muplayer"
version = "0.3.0"
description = "Music library, search, playlists and playback state for a terminal music player"
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "player", "flac", "playlist", "library", "tags", "search"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["muplayer"]

[tool.hatch.build.targets.sdist]
include = ["muplayer", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
