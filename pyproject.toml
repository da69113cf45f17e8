[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rootkeeper"
version = "0.1.0"
description = "An interactive, menu-driven file manager confined to a single root directory"
requires-python = ">=3.10"
dependencies = []
keywords = ["file manager", "directories", "menu", "terminal", "sandbox"]
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
    "Topic :: Desktop Environment :: File Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rootkeeper = "rootkeeper.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rootkeeper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
