[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortsteps"
version = "0.1.0"
description = "Classic sorting algorithms that print every intermediate step, plus a card deck sorter"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "algorithms", "education", "trace", "linked-list", "cards"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sortsteps-deck = "sortsteps.deck:main"

[tool.hatch.build.targets.wheel]
packages = ["sortsteps"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
