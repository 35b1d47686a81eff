[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "hexapode"
version = "0.1.0"
description = "Gait generation, inverse kinematics and error handling for a six-legged walking robot"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hexapod",
    "robotics",
    "inverse-kinematics",
    "gait",
    "servo",
    "legged-robot",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["hexapode*"]

[tool.pytest.ini_options]
addopts = "-ra"
