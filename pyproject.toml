[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prismpong"
version = "0.1.0"
description = "A colourful two-paddle arcade game with rainbow effects, particles and a simple computer opponent"
requires-python = ">=3.10"
keywords = ["pong", "arcade", "game", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
prismpong = "prismpong.app:main"

[tool.hatch.build.targets.wheel]
packages = ["prismpong"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
