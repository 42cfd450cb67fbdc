[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hoshiyoke"
version = "0.1.0"
description = "Game logic for a small star-dodging arcade shooter, with the vector and matrix maths behind it"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "shooter", "dodge", "vector", "matrix"]
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
    "Topic :: Games/Entertainment :: Arcade",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hoshiyoke"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
target-version = "py310"
line-length = 100

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
