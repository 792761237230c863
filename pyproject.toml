[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dutime"
version = "0.1.0"
description = "Date and time building blocks: format tokens, time-of-day parsing and formatting, zone offsets, leap tables, zone-name maps and light locales"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "time",
    "date",
    "strptime",
    "strftime",
    "timezone",
    "leap-seconds",
    "roman-numerals",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dutime-tzmap = "dutime.tzmap:main"

[tool.hatch.build.targets.wheel]
packages = ["dutime"]

[tool.hatch.build.targets.sdist]
include = ["dutime", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
