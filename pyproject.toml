[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "finpro"
version = "0.1.0"
description = "Environmental sensor readings: anomaly detection, binary storage, JSON reports and a TCP reporting client"
requires-python = ">=3.10"
dependencies = []
keywords = ["sensor", "anomaly detection", "telemetry", "temperature", "humidity"]
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
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["finpro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
