[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coldlight"
version = "0.0.1"
description = "A small application framework with typed input and window events, a self-registering test runner and a scope timer"
requires-python = ">=3.10"
dependencies = []
keywords = ["engine", "events", "application", "framework", "input"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coldlight = "coldlight.application:main"

[tool.hatch.build.targets.wheel]
packages = ["coldlight"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
