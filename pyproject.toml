[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rutils"
version = "0.1.0"
description = "Small utilities: a chained hash map, string splitting helpers and nanosecond time points"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash map", "djb2", "split", "time", "nanoseconds", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
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
packages = ["rutils"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
