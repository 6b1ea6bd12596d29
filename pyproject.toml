[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rsp"
version = "0.1.1"
description = "Manage named SSH local port forwards: add, list, edit, remove, start, stop and check rules"
requires-python = ">=3.10"
keywords = ["ssh", "port-forward", "tunnel", "cli", "networking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Utilities",
]
dependencies = [
    "click>=8.0",
    "tabulate>=0.9",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
rsp = "rsp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rsp"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
