[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pipeshell"
version = "0.1.0"
description = "Small shell building blocks: C-style string helpers, a buffered line reader, printf-style formatting and a process pipeline runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "pipeline", "heredoc", "printf", "strings"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pipeshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
