[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "miditones"
version = "0.1.0"
description = "Read Standard MIDI Files, turn their notes into timed tones and stream them over a serial port."
requires-python = ">=3.10"
dependencies = [
    "pyserial",
]
keywords = ["midi", "music", "serial", "tones", "frequency"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
miditones = "miditones.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["miditones"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
