[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rimtracks"
version = "0.1.0"
description = "Play a single track on a loop from a long soundtrack file, using a timestamps list"
requires-python = ">=3.10"
keywords = ["music", "soundtrack", "timestamps", "player", "mp3", "loop"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players :: MP3",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rimtracks = "rimtracks.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rimtracks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
