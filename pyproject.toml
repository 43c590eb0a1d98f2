[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelstrip"
version = "0.1.0"
description = "Pixel encodings, seven-segment digits and two-wire frame building for addressable LED strips"
requires-python = ">=3.10"
dependencies = []
keywords = ["led", "dotstar", "apa102", "lpd8806", "lpd6803", "p9813", "pixels", "seven-segment"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pixelstrip"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
