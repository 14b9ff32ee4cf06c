[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursekit"
version = "0.1.0"
description = "Small teaching data structures and algorithms: a bounded vector, a streaming median tracker, recursion exercises, stylometry, threading demos and container timing."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "data-structures",
    "algorithms",
    "recursion",
    "stylometry",
    "threading",
    "teaching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursekit-stack = "coursekit.array_stack:main"
coursekit-recursion = "coursekit.recursion:main"
coursekit-stylometry = "coursekit.stylometry:main"
coursekit-timing = "coursekit.container_timing:main"

[tool.hatch.build.targets.wheel]
packages = ["coursekit"]

[tool.pytest.ini_options]
addopts = "-ra"
