[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rubikscube"
version = "0.1.0"
description = "A 3x3 Rubik's cube model with move notation, plus camera and cubie transform maths for 3D display"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["rubik", "cube", "puzzle", "3d", "camera", "quaternion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rubikscube"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
