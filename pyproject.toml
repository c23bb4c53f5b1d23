[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "unibedrooms"
version = "1.0.0"
description = "A command interpreter for managing university student rooms, managers and room applications"
requires-python = ">=3.10"
dependencies = []
keywords = ["rooms", "students", "residence", "applications", "housing"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
unibedrooms = "unibedrooms.cli:main"

[tool.setuptools.packages.find]
include = ["unibedrooms*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
