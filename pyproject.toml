[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mentalmath"
version = "0.1.0"
description = "Rating-driven difficulty model, session state machine and profile storage for mental arithmetic practice"
requires-python = ">=3.10"
dependencies = []
keywords = ["mental math", "arithmetic", "practice", "difficulty", "rating"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
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
mentalmath = "mentalmath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mentalmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
