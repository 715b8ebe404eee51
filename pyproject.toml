[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shotkit"
version = "0.9.0"
description = "Settings storage, filename pattern expansion and desktop helpers for a screenshot tool."
requires-python = ">=3.10"
keywords = ["screenshot", "capture", "desktop", "settings", "strftime", "desktop-entry"]
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
    "Topic :: Multimedia :: Graphics :: Capture :: Screen Capture",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["shotkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
