[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "errtext"
version = "0.1.0"
description = "Readable, length-limited text for operating-system error numbers"
requires-python = ">=3.10"
dependencies = []
keywords = ["errno", "strerror", "error message", "errors"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["errtext"]

[tool.pytest.ini_options]
addopts = "-ra"
