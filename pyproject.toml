[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskonpurpose"
version = "0.1.130"
description = "Parse the exact and relative date/time phrases typed when planning and reflecting on tasks"
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "scheduling", "datetime", "parsing", "relative time", "weekday"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["taskonpurpose"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
