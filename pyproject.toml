[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dywoqlib"
version = "0.1.0"
description = "General-purpose utilities: optional values, cursor iterators, checked containers, a mutable string and ANSI console helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "optional", "iterator", "containers", "ansi", "collections"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dywoqlib"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
