[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "annualleave"
version = "0.1.0"
description = "Annual leave calculator for public-sector staff, with a small command-line front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["annual leave", "vacation", "leave calculator", "hr", "public sector"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Korean",
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
annualleave = "annualleave.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["annualleave"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
