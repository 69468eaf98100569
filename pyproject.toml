[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wiringcore"
version = "0.1.0"
description = "Wiring-style core utilities: strings, printing, stream parsing, timing, pulse measurement and IP addresses"
requires-python = ">=3.10"
dependencies = []
keywords = ["wiring", "embedded", "sketch", "stream", "string", "timing"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wiringcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
