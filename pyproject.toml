[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nodeish"
version = "0.1.0"
description = "Event emitters, a small regex engine, UTF conversions, zlib streams, file streams, dates and ANSI console output."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "events",
    "event-emitter",
    "regex",
    "utf-8",
    "utf-16",
    "zlib",
    "gzip",
    "streams",
    "ansi",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nodeish"]

[tool.hatch.build.targets.sdist]
include = ["nodeish", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
