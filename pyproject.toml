[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "printkit"
version = "0.1.0"
description = "printf-style conversions: C-width integers, binary, hex, octal, addresses, ROT13, reversed and escaped strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "format", "conversion", "two's complement", "rot13"]
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
    "Topic :: Text Processing :: General",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["printkit"]

[tool.pytest.ini_options]
addopts = "-ra"
