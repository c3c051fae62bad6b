[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kotapenduduk"
version = "0.1.0"
description = "Keep a register of cities and their residents from an interactive text menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["city", "residents", "registry", "linked list", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kotapenduduk = "kotapenduduk.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["kotapenduduk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
