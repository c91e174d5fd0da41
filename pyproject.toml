[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "genfunctions"
version = "0.1.0"
description = "Small helpers for string lists, trimming, splitting, typed console input and file reading"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "split", "trim", "input", "utilities"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
genfunctions-demo = "genfunctions.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["genfunctions"]

[tool.pytest.ini_options]
addopts = "-ra"
