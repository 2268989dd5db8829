[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drawkit"
version = "0.1.0"
description = "Geometry, view clipping, drag handling, selection, settings and trigonometric curve helpers for 2D drawing tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["drawing", "geometry", "view", "region", "drag", "selection", "waveform"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["drawkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 79
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
