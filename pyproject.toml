[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ktg"
version = "0.1.0"
description = "Growable arrays, timers and a small select-based TCP echo server and client"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "dynamic array", "timer", "scheduler", "echo server", "select"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ktg-vector-demo = "ktg.myvector:main"
ktg-echo-server = "ktg.echo_server:main"
ktg-echo-client = "ktg.echo_client:main"

[tool.hatch.build.targets.wheel]
packages = ["ktg"]

[tool.pytest.ini_options]
addopts = "-ra"
