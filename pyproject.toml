[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "timestampsvc"
version = "0.1.0"
description = "Timestamp service: current and streamed timestamps with selectable precision"
requires-python = ">=3.10"
dependencies = []
keywords = ["timestamp", "time", "clock", "precision", "stream"]
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
    "Topic :: System :: Networking :: Time Synchronization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["timestampsvc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
