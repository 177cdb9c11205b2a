[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schedsim"
version = "0.1.0"
description = "CPU scheduling and process synchronisation simulations for teaching operating systems"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "scheduling",
    "operating-systems",
    "fcfs",
    "sjf",
    "round-robin",
    "srtf",
    "edf",
    "rate-monotonic",
    "dining-philosophers",
    "producer-consumer",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
schedsim = "schedsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["schedsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
