[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zumic"
version = "0.1.0"
description = "Core of an in-memory key-value store: typed-value commands over a mapping, ACL users and configuration parsing"
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = [
    "key-value",
    "in-memory",
    "database",
    "acl",
    "sorted-set",
    "commands",
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
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["zumic"]

[tool.hatch.build.targets.sdist]
include = [
    "zumic",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
