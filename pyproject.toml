[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "muzodajnia"
version = "0.1.0"
description = "Terminal music library: search and stream tracks, keep playlists and listening history per user."
requires-python = ">=3.10"
keywords = ["music", "player", "terminal", "playlist", "streaming"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]
dependencies = [
    "requests",
    "pygame",
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
muzodajnia = "muzodajnia.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["muzodajnia"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
