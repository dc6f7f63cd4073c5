[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "garagemqtt"
version = "0.1.0"
description = "Garage door status types and the session building blocks of a blocking MQTT client"
requires-python = ">=3.10"
dependencies = []
keywords = ["mqtt", "iot", "garage-door", "topic-matching", "embedded"]
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
    "Topic :: Communications",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["garagemqtt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
