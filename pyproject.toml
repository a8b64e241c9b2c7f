[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mxlkit"
version = "0.6.0"
description = "TAI timing, head index arithmetic, and flow and grain header layouts for shared-memory media flows"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "media",
    "video",
    "audio",
    "flow",
    "grain",
    "tai",
    "timing",
    "nmos",
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
    "Topic :: Multimedia :: Video",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mxlkit"]

[tool.hatch.build.targets.sdist]
include = ["mxlkit", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 120
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["mxlkit"]
warn_unused_ignores = true
