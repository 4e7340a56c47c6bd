[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "laundrysim"
version = "0.1.0"
description = "A small washing-machine model: load weighing, wash-mode selection and per-stage water and time estimates."
requires-python = ">=3.10"
dependencies = []
keywords = ["washing machine", "simulation", "laundry", "wash modes", "home appliance"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["laundrysim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
