[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fsshell"
version = "0.1.0"
description = "Building blocks for a Unix-like filesystem shell: archive packing, grep, history, completion and disk usage reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "shell", "archive", "rle", "grep", "history", "df", "completion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["fsshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
