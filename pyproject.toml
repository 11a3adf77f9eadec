[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "muikit"
version = "0.1.0"
description = "A minimal retained-mode UI toolkit on pygame: windows, text, images, groups and an event queue"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["gui", "ui", "widgets", "window", "events", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
muikit-demo = "muikit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["muikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
