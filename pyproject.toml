[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aaxutils"
version = "0.1.0"
description = "Command-line option parsing, playlist reading, audio format and waveform script helpers for audio tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "playlist", "m3u", "pls", "waveform", "command-line"]
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
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aaxutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
